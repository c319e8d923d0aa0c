"""
Adopter lifestyle and environment questionnaire models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class WorkSchedule(str, Enum):
    """Where the adopter works."""
    REMOTE = "remote"
    HYBRID = "hybrid"
    OFFICE = "office"
    VARIED = "varied"


class WorkHours(str, Enum):
    """Typical working hours."""
    PART_TIME = "part-time"
    STANDARD = "standard"
    EXTENDED = "extended"
    FLEXIBLE = "flexible"


class TravelFrequency(str, Enum):
    """How often the adopter travels."""
    RARELY = "rarely"
    OCCASIONALLY = "occasionally"
    FREQUENTLY = "frequently"
    VERY_FREQUENTLY = "very-frequently"


class HomeType(str, Enum):
    """Types of homes."""
    APARTMENT = "apartment"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    HOUSE = "house"


class LifestyleProfile(BaseModel):
    """Daily routine and activity answers. Unset choices are None."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    activity_level: int = Field(default=5, ge=1, le=10, description="Activity level slider (1-10)")
    work_schedule: Optional[WorkSchedule] = Field(default=None, description="Work schedule")
    work_hours: Optional[WorkHours] = Field(default=None, description="Typical work hours")
    available_time_hours: float = Field(
        default=2.0,
        ge=1.0,
        le=8.0,
        description="Hours per day available for pet care, in half-hour steps"
    )
    travel_frequency: Optional[TravelFrequency] = Field(default=None, description="Travel frequency")

    @field_validator("available_time_hours")
    @classmethod
    def validate_half_hour_step(cls, v: float) -> float:
        """Available time moves in 0.5 hour increments."""
        if (v * 2) != int(v * 2):
            raise ValueError("available_time_hours must be a multiple of 0.5")
        return v


# Detail field -> the flag it depends on. The flag is declared first so it is
# already validated when the detail is checked.
_DETAIL_FLAGS = {
    "other_pets_details": "has_other_pets",
    "children_details": "has_children",
}


class EnvironmentProfile(BaseModel):
    """
    Home environment and household answers.

    Detail text for other pets and children is only kept while the matching
    flag is set; clearing the flag drops the detail.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    home_type: Optional[HomeType] = Field(default=None, description="Type of home")
    has_yard: bool = Field(default=False, description="Has yard or outdoor space")
    space_size_sq_ft: int = Field(default=0, ge=0, description="Living space in square feet")

    has_other_pets: bool = Field(default=False, description="Has other pets")
    other_pets_details: Optional[str] = Field(default=None, description="Description of other pets")

    experience_level: int = Field(default=5, ge=1, le=10, description="Experience slider (1-10)")

    has_children: bool = Field(default=False, description="Has children at home")
    children_details: Optional[str] = Field(default=None, description="Ages and details of children")

    @field_validator("other_pets_details", "children_details")
    @classmethod
    def drop_untagged_details(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        """Details are meaningful only while their (already coerced) flag is true."""
        if not info.data.get(_DETAIL_FLAGS[info.field_name]):
            return None
        return v

    @property
    def other_pets(self) -> Optional[str]:
        """Other-pets detail, or None when the adopter has no other pets."""
        if not self.has_other_pets:
            return None
        return self.other_pets_details or ""

    @property
    def children(self) -> Optional[str]:
        """Children detail, or None when there are no children."""
        if not self.has_children:
            return None
        return self.children_details or ""
