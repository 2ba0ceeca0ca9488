"""Tests for the Profiles module."""

import pytest
from pydantic import ValidationError

from american_generator.exceptions import InvalidFieldError
from american_generator.profiles.base import (
    DISPLAY_ORDER,
    LockMask,
    Profile,
    ProfileField,
    format_profile,
    merge,
)


def make_profile(suffix: str = "") -> Profile:
    return Profile(
        firstName=f"Mary{suffix}",
        lastName=f"Smith{suffix}",
        gender="female",
        state=f"Texas{suffix}",
        city=f"Austin{suffix}",
        streetAddress=f"12 Elm St{suffix}",
        zipCode=f"7870{suffix or '1'}",
        birthdate=f"01/15/199{suffix or '0'}",
    )


@pytest.fixture
def old_profile():
    return make_profile()


@pytest.fixture
def fresh_profile():
    return Profile(
        first_name="James",
        last_name="Brown",
        gender="male",
        state="Ohio",
        city="Dayton",
        street_address="9 Oak Ave",
        zip_code="45402",
        birthdate="07/04/1975",
    )


class TestProfileField:
    """Tests for ProfileField."""

    def test_eight_fields(self):
        assert len(ProfileField) == 8
        assert {f.value for f in ProfileField} == {
            "firstName", "lastName", "gender", "state",
            "city", "streetAddress", "zipCode", "birthdate",
        }

    def test_parse_identifier_and_attribute(self):
        assert ProfileField.parse("zipCode") is ProfileField.ZIP_CODE
        assert ProfileField.parse("zip_code") is ProfileField.ZIP_CODE
        assert ProfileField.parse(ProfileField.CITY) is ProfileField.CITY

    def test_parse_unknown_field(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            ProfileField.parse("postalCode")

        assert exc_info.value.field == "postalCode"
        assert isinstance(exc_info.value, ValueError)

    def test_parse_non_string(self):
        with pytest.raises(InvalidFieldError):
            ProfileField.parse(3)

    def test_labels(self):
        assert ProfileField.STREET_ADDRESS.label == "Street Address"
        assert ProfileField.FIRST_NAME.attribute == "first_name"

    def test_display_order(self):
        assert [f.value for f in DISPLAY_ORDER] == [
            "firstName", "lastName", "gender", "streetAddress",
            "city", "state", "zipCode", "birthdate",
        ]
        assert set(DISPLAY_ORDER) == set(ProfileField)


class TestProfile:
    """Tests for Profile class."""

    def test_create_by_alias_or_name(self, old_profile, fresh_profile):
        assert old_profile.first_name == "Mary"
        assert fresh_profile.zip_code == "45402"

    def test_profile_is_immutable(self, old_profile):
        with pytest.raises(ValidationError):
            old_profile.first_name = "Other"

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Profile(firstName="Mary")

    def test_get_by_field(self, old_profile):
        assert old_profile.get(ProfileField.CITY) == "Austin"
        assert old_profile["streetAddress"] == "12 Elm St"

    def test_get_unknown_field(self, old_profile):
        with pytest.raises(InvalidFieldError):
            old_profile.get("postalCode")

    def test_from_fields(self, old_profile):
        values = {field: old_profile.get(field) for field in ProfileField}
        assert Profile.from_fields(values) == old_profile

    def test_to_dict_in_display_order(self, old_profile):
        data = old_profile.to_dict()

        assert list(data) == [f.value for f in DISPLAY_ORDER]
        assert data["zipCode"] == "78701"


class TestLockMask:
    """Tests for LockMask class."""

    def test_defaults_unlocked(self):
        locks = LockMask()

        assert len(locks) == 8
        assert set(locks) == set(ProfileField)
        assert not any(locks.values())

    def test_initial_values(self):
        locks = LockMask({"firstName": True, ProfileField.CITY: True})

        assert locks[ProfileField.FIRST_NAME]
        assert locks["city"]
        assert not locks["state"]
        assert len(locks) == 8

    def test_initial_unknown_key(self):
        with pytest.raises(InvalidFieldError):
            LockMask({"postalCode": True})

    def test_toggle(self):
        locks = LockMask()

        assert locks.toggle("gender") is True
        assert locks[ProfileField.GENDER]
        assert locks.toggle(ProfileField.GENDER) is False
        assert not locks["gender"]

    def test_toggle_keeps_exactly_eight_keys(self):
        locks = LockMask()
        for field in ProfileField:
            locks.toggle(field)
            assert len(locks) == 8

        assert set(locks) == set(ProfileField)

    def test_toggle_unknown_field(self):
        locks = LockMask()

        with pytest.raises(InvalidFieldError):
            locks.toggle("postalCode")

        assert len(locks) == 8
        assert not any(locks.values())

    def test_contains(self):
        locks = LockMask()

        assert "zipCode" in locks
        assert ProfileField.BIRTHDATE in locks
        assert "postalCode" not in locks

    def test_unknown_key_lookup(self):
        locks = LockMask()

        with pytest.raises(KeyError):
            locks["postalCode"]

        assert locks.get("postalCode", False) is False
        assert locks.get("zipCode", True) is False

    def test_copy_is_detached(self):
        locks = LockMask()
        copy = locks.copy()
        copy[ProfileField.CITY] = True

        assert not locks[ProfileField.CITY]

    def test_locked_fields(self):
        locks = LockMask({"zipCode": True, "firstName": True})

        assert locks.locked_fields() == [ProfileField.FIRST_NAME, ProfileField.ZIP_CODE]

    def test_to_dict(self):
        locks = LockMask({"state": True})

        assert locks.to_dict()["state"] is True
        assert locks.to_dict()["city"] is False


class TestMerge:
    """Tests for the merge function."""

    def test_no_locks_takes_fresh(self, old_profile, fresh_profile):
        assert merge(old_profile, fresh_profile, LockMask()) == fresh_profile

    def test_all_locked_keeps_old(self, old_profile, fresh_profile):
        locks = LockMask({field: True for field in ProfileField})

        assert merge(old_profile, fresh_profile, locks) == old_profile

    def test_partial_locks(self, old_profile, fresh_profile):
        locks = LockMask({"firstName": True, "city": True})
        merged = merge(old_profile, fresh_profile, locks)

        assert merged.first_name == "Mary"
        assert merged.city == "Austin"
        assert merged.last_name == "Brown"
        assert merged.state == "Ohio"
        assert merged.zip_code == "45402"

    def test_plain_dict_locks(self, old_profile, fresh_profile):
        merged = merge(old_profile, fresh_profile, {ProfileField.BIRTHDATE: True})

        assert merged.birthdate == "01/15/1990"
        assert merged.first_name == "James"

    def test_merge_does_not_modify_inputs(self, old_profile, fresh_profile):
        merge(old_profile, fresh_profile, LockMask({"gender": True}))

        assert old_profile == make_profile()
        assert fresh_profile.gender == "male"


class TestFormatProfile:
    """Tests for the export text."""

    def test_label_value_lines(self, old_profile):
        text = format_profile(old_profile)

        assert text.splitlines() == [
            "firstName: Mary",
            "lastName: Smith",
            "gender: female",
            "streetAddress: 12 Elm St",
            "city: Austin",
            "state: Texas",
            "zipCode: 78701",
            "birthdate: 01/15/1990",
        ]
        assert not text.endswith("\n")

    def test_custom_order(self, old_profile):
        text = format_profile(old_profile, order=(ProfileField.CITY, ProfileField.STATE))

        assert text == "city: Austin\nstate: Texas"
