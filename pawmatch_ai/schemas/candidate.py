"""
Candidate animal data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Species(str, Enum):
    """Candidate species."""
    DOG = "Dog"
    CAT = "Cat"
    RABBIT = "Rabbit"
    OTHER = "Other"


class EnergyLevel(str, Enum):
    """Candidate energy level."""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


class CandidateDraft(BaseModel):
    """In-progress candidate entry. Nothing here is required."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="", description="Animal name")
    species: Optional[str] = Field(default=None, description="Selected species")
    age_years: int = Field(default=0, description="Age in years")
    energy_level: Optional[str] = Field(default=None, description="Selected energy level")
    key_traits: str = Field(default="", description="Key traits and behaviors")
    special_needs: str = Field(default="", description="Special needs (optional)")


class CandidateAnimal(BaseModel):
    """A committed candidate under assessment."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique candidate identifier")
    name: str = Field(..., min_length=1, description="Animal name")
    species: Species = Field(..., description="Species")
    age_years: int = Field(..., ge=0, description="Age in years")
    energy_level: EnergyLevel = Field(..., description="Energy level")
    key_traits: str = Field(..., min_length=1, description="Key traits and behaviors")
    special_needs: Optional[str] = Field(default=None, description="Special needs, if any")

    @property
    def has_special_needs(self) -> bool:
        return bool(self.special_needs)
