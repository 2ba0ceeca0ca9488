#!/usr/bin/env python3
"""
Demo script showing basic usage of the American Generator.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

from american_generator.engine.profile_store import ProfileStore
from american_generator.engine.validation_engine import ProfileValidator
from american_generator.exceptions import InvalidFieldError
from american_generator.generators.profile_generator import ProfileGenerator
from american_generator.profiles.base import ProfileField, format_profile
from american_generator.settings.base import GeneratorSettings


def demo_generation():
    """Demonstrate generating standalone profiles."""
    print("=" * 60)
    print("1. GENERATING PROFILES")
    print("=" * 60)

    generator = ProfileGenerator(seed=42)

    for i, profile in enumerate(generator.generate_many(2)):
        print(f"Profile {i + 1}:")
        print(format_profile(profile))
        print()

    return generator


def demo_locking(generator):
    """Demonstrate locking fields across regenerations."""
    print("=" * 60)
    print("2. LOCK AND REGENERATE")
    print("=" * 60)

    store = ProfileStore.initialize(generator=generator)
    store.toggle_lock(ProfileField.FIRST_NAME)
    store.toggle_lock("city")

    print(f"Locked: {[f.value for f in store.locked_fields()]}")
    print()

    for i in range(3):
        profile = store.regenerate()
        print(f"Regeneration {i + 1}: {profile.first_name} {profile.last_name}, "
              f"{profile.city}, {profile.state} {profile.zip_code}")
    print()

    try:
        store.toggle_lock("postalCode")
    except InvalidFieldError as e:
        print(f"Rejected: {e}")
    print()

    return store


def demo_gender_lock():
    """Demonstrate a locked gender steering first names."""
    print("=" * 60)
    print("3. LOCKED GENDER")
    print("=" * 60)

    store = ProfileStore.initialize(generator=ProfileGenerator(seed=7))
    store.toggle_lock(ProfileField.GENDER)
    gender = store.current.gender

    names = [store.regenerate().first_name for _ in range(5)]
    print(f"Gender {gender}: {', '.join(names)}")
    print()


def demo_validation():
    """Demonstrate validation capabilities."""
    print("=" * 60)
    print("4. VALIDATION")
    print("=" * 60)

    settings = GeneratorSettings(min_age=18, max_age=80)
    generator = ProfileGenerator(settings=settings, seed=3)
    validator = ProfileValidator(settings=settings)

    result = validator.validate_profiles(generator.stream(50))
    print(f"Checked {result.validated_count} profiles: {'PASS' if result.valid else 'FAIL'}")
    for issue in result.issues:
        print(f"  - [{issue.severity.value}] {issue.message}")
    print()


def main():
    """Run all demos."""
    print()
    print("AMERICAN GENERATOR DEMO")
    print("=" * 60)
    print()

    generator = demo_generation()
    demo_locking(generator)
    demo_gender_lock()
    demo_validation()

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print()
    print("To use the CLI, install the package and run:")
    print("  pip install -e .")
    print("  american-gen --help")
    print()


if __name__ == "__main__":
    main()
