"""Data schemas and models for PawMatch AI."""

from .adopter_profile import (
    LifestyleProfile,
    EnvironmentProfile,
    WorkSchedule,
    WorkHours,
    TravelFrequency,
    HomeType,
)
from .candidate import CandidateAnimal, CandidateDraft, Species, EnergyLevel
from .match_result import (
    FACTOR_NAMES,
    FactorScore,
    CompatibilityBreakdown,
    MatchOutcome,
    AssessmentSummary,
    OverallInsights,
    MatchResult,
    FactorView,
    ResultCard,
)
from .wizard_state import WizardStep, WizardState, TOTAL_STEPS

__all__ = [
    "LifestyleProfile",
    "EnvironmentProfile",
    "WorkSchedule",
    "WorkHours",
    "TravelFrequency",
    "HomeType",
    "CandidateAnimal",
    "CandidateDraft",
    "Species",
    "EnergyLevel",
    "FACTOR_NAMES",
    "FactorScore",
    "CompatibilityBreakdown",
    "MatchOutcome",
    "AssessmentSummary",
    "OverallInsights",
    "MatchResult",
    "FactorView",
    "ResultCard",
    "WizardStep",
    "WizardState",
    "TOTAL_STEPS",
]
