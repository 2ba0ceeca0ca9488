"""Profile Store - owns the current profile and its lock mask.

The Profile Store:
- Generates the initial profile
- Regenerates while keeping locked fields
- Toggles locks one field at a time
- Hands out read-only snapshots for rendering and export
"""

from typing import Any
import logging

from pydantic import BaseModel, ConfigDict, Field

from american_generator.generators.base import Generator
from american_generator.generators.profile_generator import ProfileGenerator
from american_generator.profiles.base import (
    LockMask,
    Profile,
    ProfileField,
    format_profile,
    merge,
)
from american_generator.settings.base import GeneratorSettings

logger = logging.getLogger(__name__)


class ProfileSnapshot(BaseModel):
    """A detached view of the store's state."""

    model_config = ConfigDict(frozen=True)

    current: Profile = Field(..., description="The current profile")
    locks: dict[ProfileField, bool] = Field(..., description="Copy of the lock flags")

    def summary(self) -> dict[str, Any]:
        return {
            "current": self.current.to_dict(),
            "locks": {field.value: locked for field, locked in self.locks.items()},
        }


class ProfileStore:
    """Holds the current profile plus a per-field lock mask.

    Each operation completes fully before returning. Locked fields survive
    ``regenerate``; all other fields are drawn fresh from the generator.
    """

    def __init__(
        self,
        generator: Generator | None = None,
        settings: GeneratorSettings | None = None,
    ):
        """Initialize the store with a freshly generated profile.

        Args:
            generator: Source of fresh profiles (defaults to ProfileGenerator)
            settings: Settings for the default generator

        Raises:
            GenerationFailure: If the initial profile cannot be generated
        """
        self.generator = generator or ProfileGenerator(settings=settings)
        self._current = self.generator.generate()
        self._locks = LockMask()

    @classmethod
    def initialize(
        cls,
        generator: Generator | None = None,
        settings: GeneratorSettings | None = None,
    ) -> "ProfileStore":
        """Create a store with a new profile and every field unlocked."""
        return cls(generator=generator, settings=settings)

    @property
    def current(self) -> Profile:
        return self._current

    @property
    def locks(self) -> dict[ProfileField, bool]:
        return self._locks.copy()

    def regenerate(self) -> Profile:
        """Replace the current profile, keeping locked field values.

        Locked values are passed to the generator as pinned values so that
        dependent fields (first name for gender, zip code for state) stay
        consistent with them, then merged over the fresh profile.

        Returns:
            The new current profile

        Raises:
            GenerationFailure: If generation fails; the current profile is kept
        """
        pinned = {field: self._current.get(field) for field in self._locks.locked_fields()}
        fresh = self.generator.generate(pinned=pinned)
        self._current = merge(self._current, fresh, self._locks)

        logger.debug(
            "Regenerated profile, kept: %s",
            ", ".join(field.value for field in pinned) or "none",
        )
        return self._current

    def toggle_lock(self, field: ProfileField | str) -> dict[ProfileField, bool]:
        """Flip the lock on a single field.

        Args:
            field: The field to lock or unlock

        Returns:
            A copy of the lock flags after the change

        Raises:
            InvalidFieldError: If the field is not recognized; nothing changes
        """
        locked = self._locks.toggle(field)
        logger.debug("%s %s", "Locked" if locked else "Unlocked", ProfileField.parse(field).value)
        return self._locks.copy()

    def is_locked(self, field: ProfileField | str) -> bool:
        return self._locks[ProfileField.parse(field)]

    def locked_fields(self) -> list[ProfileField]:
        return self._locks.locked_fields()

    def snapshot(self) -> ProfileSnapshot:
        """Get the current profile and lock flags for rendering or copying."""
        return ProfileSnapshot(current=self._current, locks=self._locks.copy())

    def export_text(self) -> str:
        """Render the current profile as ``label: value`` lines."""
        return format_profile(self._current)
