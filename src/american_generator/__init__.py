"""
American Generator - Random US profiles with field-level locks.

Generates a fictitious person (name, gender, address, birthdate) and lets
individual fields be locked so that regeneration keeps them while the rest
are drawn fresh.
"""

__version__ = "0.1.0"

from american_generator.exceptions import (
    AmericanGeneratorError,
    GenerationFailure,
    InvalidFieldError,
)
from american_generator.profiles.base import LockMask, Profile, ProfileField, merge
from american_generator.generators.profile_generator import ProfileGenerator
from american_generator.engine.profile_store import ProfileStore
from american_generator.engine.validation_engine import ProfileValidator
from american_generator.settings.base import GeneratorSettings

__all__ = [
    "AmericanGeneratorError",
    "GenerationFailure",
    "GeneratorSettings",
    "InvalidFieldError",
    "LockMask",
    "Profile",
    "ProfileField",
    "ProfileGenerator",
    "ProfileStore",
    "ProfileValidator",
    "merge",
]
