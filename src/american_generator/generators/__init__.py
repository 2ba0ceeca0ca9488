"""Generators module - the Source Layer of the generator.

Generators draw fresh profiles from a fake-data source:
- ProfileGenerator: Faker-backed US profiles
"""

from american_generator.generators.base import Generator
from american_generator.generators.profile_generator import GENDERS, ProfileGenerator
from american_generator.generators.states import STATE_ABBREVIATIONS, state_abbreviation

__all__ = [
    "GENDERS",
    "Generator",
    "ProfileGenerator",
    "STATE_ABBREVIATIONS",
    "state_abbreviation",
]
