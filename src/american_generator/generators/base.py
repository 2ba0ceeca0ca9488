"""Base classes for Generators - the Source Layer.

Generators are responsible for:
- Producing complete, fresh profiles
- Honoring pinned values so dependent fields stay consistent
- Never holding state beyond their random source

The profile store decides which values survive; generators only draw.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping

from american_generator.profiles.base import Profile, ProfileField


class Generator(ABC):
    """Abstract base class for profile generators."""

    def __init__(self, seed: int | None = None):
        """Initialize the generator.

        Args:
            seed: Optional random seed for deterministic generation
        """
        self._seed = seed
        self._reseed(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @seed.setter
    def seed(self, value: int | None) -> None:
        self._seed = value
        self._reseed(value)

    def _reseed(self, seed: int | None) -> None:
        """Reset the random source. Override in subclasses that hold one."""

    @abstractmethod
    def generate(
        self,
        pinned: Mapping[ProfileField | str, str] | None = None,
    ) -> Profile:
        """Generate a complete profile.

        Args:
            pinned: Field values to keep verbatim; dependent fields are drawn
                to be consistent with them

        Returns:
            A fully populated Profile

        Raises:
            GenerationFailure: If the underlying data source fails
        """

    def generate_many(self, count: int) -> list[Profile]:
        """Generate several independent profiles."""
        return list(self.stream(count))

    def stream(self, count: int | None = None) -> Iterator[Profile]:
        """Stream profiles one at a time.

        Args:
            count: Optional limit on profiles (None for infinite)

        Yields:
            Generated profiles one at a time
        """
        produced = 0
        while count is None or produced < count:
            yield self.generate()
            produced += 1
