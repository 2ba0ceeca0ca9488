"""Profiles module - the Data Layer of the generator.

Profiles are immutable records of one fictitious person, paired with a
per-field lock mask that decides which values survive regeneration.
"""

from american_generator.profiles.base import (
    DISPLAY_ORDER,
    LockMask,
    Profile,
    ProfileField,
    format_profile,
    merge,
)

__all__ = [
    "DISPLAY_ORDER",
    "LockMask",
    "Profile",
    "ProfileField",
    "format_profile",
    "merge",
]
