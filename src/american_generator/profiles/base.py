"""Base classes for Profiles - the Data Layer.

A Profile is the full set of eight generated attributes describing one
fictitious person. Profiles are immutable; a new one is produced on every
regeneration and locked values are copied forward by ``merge``.
"""

from collections.abc import Iterator, Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from american_generator.exceptions import InvalidFieldError


class ProfileField(str, Enum):
    """Identifiers for the eight attributes of a profile."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    GENDER = "gender"
    STATE = "state"
    CITY = "city"
    STREET_ADDRESS = "streetAddress"
    ZIP_CODE = "zipCode"
    BIRTHDATE = "birthdate"

    @property
    def attribute(self) -> str:
        """Attribute name of this field on the Profile model."""
        return _ATTRIBUTES[self]

    @property
    def label(self) -> str:
        """Human-readable label used when rendering this field."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: "ProfileField | str") -> "ProfileField":
        """Resolve a field from a member, its identifier or its attribute name.

        Args:
            value: A ProfileField, a camelCase identifier such as ``"zipCode"``
                or a snake_case attribute name such as ``"zip_code"``

        Returns:
            The matching ProfileField

        Raises:
            InvalidFieldError: If the value names none of the eight fields
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value in (member.value, member.attribute):
                    return member
        raise InvalidFieldError(value)


_ATTRIBUTES: dict[ProfileField, str] = {
    ProfileField.FIRST_NAME: "first_name",
    ProfileField.LAST_NAME: "last_name",
    ProfileField.GENDER: "gender",
    ProfileField.STATE: "state",
    ProfileField.CITY: "city",
    ProfileField.STREET_ADDRESS: "street_address",
    ProfileField.ZIP_CODE: "zip_code",
    ProfileField.BIRTHDATE: "birthdate",
}

_LABELS: dict[ProfileField, str] = {
    ProfileField.FIRST_NAME: "First Name",
    ProfileField.LAST_NAME: "Last Name",
    ProfileField.GENDER: "Gender",
    ProfileField.STATE: "State",
    ProfileField.CITY: "City",
    ProfileField.STREET_ADDRESS: "Street Address",
    ProfileField.ZIP_CODE: "Zip Code",
    ProfileField.BIRTHDATE: "Birthdate",
}

# Order in which fields are displayed and exported.
DISPLAY_ORDER: tuple[ProfileField, ...] = (
    ProfileField.FIRST_NAME,
    ProfileField.LAST_NAME,
    ProfileField.GENDER,
    ProfileField.STREET_ADDRESS,
    ProfileField.CITY,
    ProfileField.STATE,
    ProfileField.ZIP_CODE,
    ProfileField.BIRTHDATE,
)


class Profile(BaseModel):
    """An immutable record of one fictitious person.

    Every field is a string; birthdate and zip code are already formatted.
    Serialized keys use the camelCase field identifiers.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(..., alias="firstName", description="Given name")
    last_name: str = Field(..., alias="lastName", description="Family name")
    gender: str = Field(..., description="Gender category the first name was drawn for")
    state: str = Field(..., description="US state name")
    city: str = Field(..., description="City name")
    street_address: str = Field(..., alias="streetAddress", description="Street address line")
    zip_code: str = Field(..., alias="zipCode", description="Zip code within the state")
    birthdate: str = Field(..., description="Formatted date of birth")

    @classmethod
    def from_fields(cls, values: Mapping[ProfileField, str]) -> "Profile":
        """Build a profile from a complete field-to-value mapping."""
        return cls(**{field.attribute: values[field] for field in ProfileField})

    def get(self, field: ProfileField | str) -> str:
        """Get the value of a single field."""
        return getattr(self, ProfileField.parse(field).attribute)

    def __getitem__(self, field: ProfileField | str) -> str:
        return self.get(field)

    def to_dict(self) -> dict[str, str]:
        """Return the profile keyed by field identifier, in display order."""
        return {field.value: self.get(field) for field in DISPLAY_ORDER}


class LockMask(Mapping[ProfileField, bool]):
    """Per-field lock flags for a profile.

    The mask always holds exactly the eight ProfileField keys. Flags are only
    changed one field at a time through ``toggle``.
    """

    def __init__(self, initial: Mapping[ProfileField | str, bool] | None = None):
        self._locks: dict[ProfileField, bool] = {field: False for field in ProfileField}
        for key, locked in (initial or {}).items():
            self._locks[ProfileField.parse(key)] = bool(locked)

    def toggle(self, field: ProfileField | str) -> bool:
        """Flip the lock on a field.

        Args:
            field: The field to toggle

        Returns:
            The new lock state of the field

        Raises:
            InvalidFieldError: If the field is not recognized
        """
        member = ProfileField.parse(field)
        self._locks[member] = not self._locks[member]
        return self._locks[member]

    def locked_fields(self) -> list[ProfileField]:
        """List the currently locked fields."""
        return [field for field, locked in self._locks.items() if locked]

    def copy(self) -> dict[ProfileField, bool]:
        """Return a detached copy of the flags."""
        return dict(self._locks)

    def to_dict(self) -> dict[str, bool]:
        return {field.value: locked for field, locked in self._locks.items()}

    def __getitem__(self, field: ProfileField | str) -> bool:
        try:
            member = ProfileField.parse(field)
        except InvalidFieldError as e:
            raise KeyError(field) from e
        return self._locks[member]

    def __iter__(self) -> Iterator[ProfileField]:
        return iter(self._locks)

    def __len__(self) -> int:
        return len(self._locks)

    def __repr__(self) -> str:
        locked = ", ".join(field.value for field in self.locked_fields()) or "none"
        return f"LockMask(locked: {locked})"


def merge(
    old: Profile,
    fresh: Profile,
    locks: Mapping[ProfileField, bool],
) -> Profile:
    """Combine two profiles according to a lock mask.

    Locked fields keep the value from ``old``; every other field takes the
    value from ``fresh``.

    Args:
        old: The profile before regeneration
        fresh: A newly generated profile
        locks: Lock flags keyed by field (missing fields count as unlocked)

    Returns:
        The merged profile
    """
    return Profile.from_fields({
        field: old.get(field) if locks.get(field, False) else fresh.get(field)
        for field in ProfileField
    })


def format_profile(
    profile: Profile,
    order: tuple[ProfileField, ...] = DISPLAY_ORDER,
) -> str:
    """Render a profile as ``label: value`` lines, one field per line."""
    return "\n".join(f"{field.value}: {profile.get(field)}" for field in order)
