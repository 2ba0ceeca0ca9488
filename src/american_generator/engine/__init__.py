"""Engine module - Runtime layer.

Contains:
- Profile Store: Holds the current profile and its locks
- Validation Engine: Checks generated profiles for consistency
"""

from american_generator.engine.profile_store import ProfileSnapshot, ProfileStore
from american_generator.engine.validation_engine import ProfileValidator, ValidationResult

__all__ = [
    "ProfileSnapshot",
    "ProfileStore",
    "ProfileValidator",
    "ValidationResult",
]
