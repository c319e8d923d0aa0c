"""
Unit tests for Profile Store.
"""

import pytest
from pydantic import ValidationError

from pawmatch_ai.components.profile_store import ProfileStore
from pawmatch_ai.schemas.adopter_profile import (
    HomeType,
    LifestyleProfile,
    EnvironmentProfile,
    TravelFrequency,
    WorkSchedule,
)


class TestProfileStore:
    """Unit tests for ProfileStore class."""

    @pytest.fixture
    def store(self):
        """Create a ProfileStore instance for testing."""
        return ProfileStore()

    def test_defaults(self, store):
        """Test documented default answers."""
        assert store.lifestyle.activity_level == 5
        assert store.lifestyle.available_time_hours == 2
        assert store.lifestyle.work_schedule is None
        assert store.lifestyle.work_hours is None
        assert store.lifestyle.travel_frequency is None

        assert store.environment.home_type is None
        assert store.environment.has_yard is False
        assert store.environment.space_size_sq_ft == 0
        assert store.environment.experience_level == 5
        assert store.environment.other_pets is None
        assert store.environment.children is None

    def test_update_is_shallow_merge(self, store):
        """Test a partial update only overwrites the named fields."""
        store.update_lifestyle(activity_level=8)
        store.update_lifestyle(work_schedule="remote")

        assert store.lifestyle.activity_level == 8
        assert store.lifestyle.work_schedule == WorkSchedule.REMOTE
        assert store.lifestyle.available_time_hours == 2

    def test_update_environment(self, store):
        store.update_environment(home_type=HomeType.HOUSE, has_yard=True, space_size_sq_ft=1800)

        assert store.environment.home_type == HomeType.HOUSE
        assert store.environment.has_yard is True
        assert store.environment.space_size_sq_ft == 1800
        assert store.environment.experience_level == 5

    @pytest.mark.parametrize("changes", [
        {"activity_level": 0},
        {"activity_level": 11},
        {"available_time_hours": 0.5},
        {"available_time_hours": 8.5},
        {"available_time_hours": 2.25},
        {"travel_frequency": "weekly"},
        {"unknown_field": True},
    ])
    def test_invalid_lifestyle_update_rejected(self, store, changes):
        """Test out-of-range updates raise and leave the profile unchanged."""
        before = store.lifestyle

        with pytest.raises(ValidationError):
            store.update_lifestyle(**changes)

        assert store.lifestyle == before

    def test_negative_space_rejected(self, store):
        with pytest.raises(ValidationError):
            store.update_environment(space_size_sq_ft=-1)
        assert store.environment.space_size_sq_ft == 0

    def test_half_hour_steps_accepted(self, store):
        store.update_lifestyle(available_time_hours=3.5)
        assert store.lifestyle.available_time_hours == 3.5

    def test_details_follow_flag(self, store):
        """Test detail text is only kept while its flag is set."""
        store.update_environment(has_other_pets=True, other_pets_details="one senior cat")
        assert store.environment.other_pets == "one senior cat"

        store.update_environment(has_other_pets=False)
        assert store.environment.other_pets is None
        assert store.environment.other_pets_details is None

    @pytest.mark.parametrize("flag", ["false", "no", "0", 0])
    def test_details_dropped_for_coerced_false_flag(self, store, flag):
        """Test a flag that coerces to False drops its detail text."""
        store.update_environment(has_other_pets=flag, other_pets_details="two cats")
        store.update_environment(has_children=flag, children_details="a teenager")

        assert store.environment.has_other_pets is False
        assert store.environment.other_pets_details is None
        assert store.environment.has_children is False
        assert store.environment.children_details is None

    def test_details_kept_for_coerced_true_flag(self, store):
        store.update_environment(has_other_pets="true", other_pets_details="two cats")
        assert store.environment.other_pets == "two cats"

    def test_details_without_flag_dropped(self, store):
        store.update_environment(children_details="two kids, 6 and 9")
        assert store.environment.children is None

    def test_flag_without_details(self, store):
        store.update_environment(has_children=True)
        assert store.environment.children == ""

    def test_reset(self, store):
        """Test reset restores both profiles to defaults."""
        store.update_lifestyle(activity_level=9, travel_frequency=TravelFrequency.RARELY)
        store.update_environment(has_children=True, children_details="toddler")

        store.reset()

        assert store.lifestyle == LifestyleProfile()
        assert store.environment == EnvironmentProfile()

    def test_profiles_are_immutable(self, store):
        with pytest.raises(ValidationError):
            store.lifestyle.activity_level = 3
