"""Profile Generator - draws fictitious US residents from Faker.

Gender is drawn before the first name and the state before the zip code,
so each dependent value is consistent with the value it was drawn for.
"""

from collections.abc import Callable, Mapping
import logging

from faker import Faker

from american_generator.exceptions import GenerationFailure
from american_generator.generators.base import Generator
from american_generator.generators.states import state_abbreviation
from american_generator.profiles.base import Profile, ProfileField
from american_generator.settings.base import LOCALE, GeneratorSettings

logger = logging.getLogger(__name__)

GENDERS: tuple[str, ...] = ("female", "male")


class ProfileGenerator(Generator):
    """Generator for complete US profiles.

    Produces one fictitious person at one fictitious address:
    - first name matching the drawn gender
    - zip code inside the drawn state's range
    - birthdate within the configured age range
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        seed: int | None = None,
    ):
        self.settings = settings or GeneratorSettings()
        self._faker = Faker(LOCALE)
        super().__init__(seed if seed is not None else self.settings.seed)

    def _reseed(self, seed: int | None) -> None:
        # A None seed gives the instance its own entropy-seeded source.
        self._faker.seed_instance(seed)

    def generate(
        self,
        pinned: Mapping[ProfileField | str, str] | None = None,
    ) -> Profile:
        """Generate a profile, keeping any pinned values.

        Args:
            pinned: Field values to keep verbatim. A pinned gender decides the
                first name and a pinned state decides the zip code.

        Returns:
            A fully populated Profile

        Raises:
            InvalidFieldError: If a pinned key is not a profile field
            GenerationFailure: If Faker fails or a pinned state is unknown
        """
        values = {ProfileField.parse(key): value for key, value in (pinned or {}).items()}
        pinned_fields = [field.value for field in values]

        try:
            self._draw(values)
        except GenerationFailure:
            raise
        except Exception as e:
            raise GenerationFailure(f"Profile generation failed: {e}") from e

        profile = Profile.from_fields(values)
        logger.debug(
            "Generated profile %s %s (%s), pinned: %s",
            profile.first_name,
            profile.last_name,
            profile.state,
            ", ".join(pinned_fields) or "none",
        )
        return profile

    def _draw(self, values: dict[ProfileField, str]) -> None:
        """Fill every missing field in place, dependencies first."""
        gender = self._pick(values, ProfileField.GENDER, self._gender)
        self._pick(values, ProfileField.FIRST_NAME, lambda: self._first_name(gender))
        self._pick(values, ProfileField.LAST_NAME, self._faker.last_name)
        state = self._pick(values, ProfileField.STATE, self._faker.state)
        self._pick(values, ProfileField.ZIP_CODE, lambda: self._zip_code(state))
        self._pick(values, ProfileField.CITY, self._faker.city)
        self._pick(values, ProfileField.STREET_ADDRESS, self._faker.street_address)
        self._pick(values, ProfileField.BIRTHDATE, self._birthdate)

    @staticmethod
    def _pick(
        values: dict[ProfileField, str],
        field: ProfileField,
        draw: Callable[[], str],
    ) -> str:
        if field not in values:
            values[field] = draw()
        return values[field]

    def _gender(self) -> str:
        return self._faker.random_element(GENDERS)

    def _first_name(self, gender: str) -> str:
        gender = gender.lower()
        if gender == "female":
            return self._faker.first_name_female()
        if gender == "male":
            return self._faker.first_name_male()
        return self._faker.first_name()

    def _zip_code(self, state: str) -> str:
        abbreviation = state_abbreviation(state)
        if abbreviation is None:
            raise GenerationFailure(f"No zip code range known for state {state!r}")
        return self._faker.zipcode_in_state(abbreviation)

    def _birthdate(self) -> str:
        born = self._faker.date_of_birth(
            minimum_age=self.settings.min_age,
            maximum_age=self.settings.max_age,
        )
        return self.settings.format_date(born)
