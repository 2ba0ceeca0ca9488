"""Validation Engine - checks generated profiles for consistency.

The Validation Engine ensures:
- Every field is present and non-empty
- Zip codes fall inside their state's range
- Birthdates represent an age inside the configured range
- First names match the stated gender
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

import jsonschema
from faker.providers.address.en_US import Provider as AddressProvider
from faker.providers.person.en_US import Provider as PersonProvider

from american_generator.generators.states import state_abbreviation
from american_generator.profiles.base import Profile, ProfileField
from american_generator.settings.base import GeneratorSettings


PROFILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        **{f.value: {"type": "string", "minLength": 1} for f in ProfileField},
        ProfileField.ZIP_CODE.value: {"type": "string", "pattern": r"^\d{5}$"},
    },
    "required": [f.value for f in ProfileField],
    "additionalProperties": False,
}


class ValidationSeverity(str, Enum):
    """Severity levels for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    message: str
    path: str = ""
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Outcome of checking one or more profiles."""

    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    validated_count: int = 0

    def count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity is severity)

    @property
    def error_count(self) -> int:
        return self.count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self.count(ValidationSeverity.WARNING)

    def add_issue(
        self,
        severity: ValidationSeverity,
        message: str,
        path: str = "",
        **context: Any,
    ) -> None:
        self.issues.append(ValidationIssue(severity, message, path, context))
        if severity is ValidationSeverity.ERROR:
            self.valid = False

    def absorb(self, other: "ValidationResult", prefix: str = "") -> None:
        """Fold another result into this one, re-rooting its issue paths under ``prefix``."""
        for issue in other.issues:
            if prefix:
                issue.path = f"{prefix}.{issue.path}" if issue.path else prefix
            self.issues.append(issue)
        self.valid = self.valid and other.valid
        self.validated_count += other.validated_count


def age_on(born: date, today: date) -> int:
    """Age in whole years on a given day."""
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


class ProfileValidator:
    """Validator for generated profiles.

    Consistency is checked against Faker's own tables, so a profile is valid
    exactly when it could have been drawn by the generator.
    """

    def __init__(self, settings: GeneratorSettings | None = None):
        self.settings = settings or GeneratorSettings()

    def validate_profile(
        self,
        profile: Profile,
        today: date | None = None,
    ) -> ValidationResult:
        """Validate a single profile.

        Args:
            profile: The profile to check
            today: Reference date for the age check (defaults to today)

        Returns:
            Validation result
        """
        result = ValidationResult(valid=True, validated_count=1)
        data = profile.to_dict()

        try:
            jsonschema.validate(data, PROFILE_SCHEMA)
        except jsonschema.ValidationError as e:
            result.add_issue(
                ValidationSeverity.ERROR,
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
            )

        self._check_zip_code(profile, result)
        self._check_birthdate(profile, result, today or date.today())
        self._check_first_name(profile, result)
        return result

    def validate_profiles(self, profiles: Iterable[Profile]) -> ValidationResult:
        """Validate several profiles, prefixing issue paths with their index."""
        result = ValidationResult(valid=True)
        for i, profile in enumerate(profiles):
            result.absorb(self.validate_profile(profile), prefix=f"profiles[{i}]")
        return result

    def _check_zip_code(self, profile: Profile, result: ValidationResult) -> None:
        abbreviation = state_abbreviation(profile.state)
        if abbreviation is None:
            result.add_issue(
                ValidationSeverity.ERROR,
                f"Unknown state: {profile.state}",
                path=ProfileField.STATE.value,
            )
            return

        if not profile.zip_code.isdigit():
            return

        low, high = AddressProvider.states_postcode[abbreviation]
        if not low <= int(profile.zip_code) <= high:
            result.add_issue(
                ValidationSeverity.ERROR,
                f"Zip code {profile.zip_code} is outside {profile.state} ({low:05d}-{high:05d})",
                path=ProfileField.ZIP_CODE.value,
                state=profile.state,
            )

    def _check_birthdate(
        self,
        profile: Profile,
        result: ValidationResult,
        today: date,
    ) -> None:
        try:
            born = datetime.strptime(profile.birthdate, self.settings.date_format).date()
        except ValueError:
            result.add_issue(
                ValidationSeverity.ERROR,
                f"Birthdate does not match format {self.settings.date_format}: {profile.birthdate}",
                path=ProfileField.BIRTHDATE.value,
            )
            return

        age = age_on(born, today)
        if not self.settings.min_age <= age <= self.settings.max_age:
            result.add_issue(
                ValidationSeverity.ERROR,
                f"Age {age} is outside {self.settings.min_age}-{self.settings.max_age}",
                path=ProfileField.BIRTHDATE.value,
                age=age,
            )

    def _check_first_name(self, profile: Profile, result: ValidationResult) -> None:
        names = {
            "female": PersonProvider.first_names_female,
            "male": PersonProvider.first_names_male,
        }.get(profile.gender.lower())

        if names is None:
            result.add_issue(
                ValidationSeverity.INFO,
                f"No name list for gender: {profile.gender}",
                path=ProfileField.GENDER.value,
            )
        elif profile.first_name not in names:
            result.add_issue(
                ValidationSeverity.WARNING,
                f"First name {profile.first_name} is not a typical {profile.gender} name",
                path=ProfileField.FIRST_NAME.value,
            )
