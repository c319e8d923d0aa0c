"""
Match result data models.

These mirror the payload returned by the external matching agent. Every model
is frozen: the core reads these values but never changes them.
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


# Declared order of the breakdown factors; also the tie-break order.
FACTOR_NAMES: Tuple[str, ...] = (
    "energy",
    "space",
    "experience",
    "schedule",
    "family",
    "medical",
)


class FactorScore(BaseModel):
    """One compatibility factor."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0, le=100)
    explanation: str = Field(default="")


class CompatibilityBreakdown(BaseModel):
    """The six named compatibility factors."""

    model_config = ConfigDict(frozen=True)

    energy_match: FactorScore
    space_match: FactorScore
    experience_match: FactorScore
    schedule_match: FactorScore
    family_match: FactorScore
    medical_match: FactorScore

    def factors(self) -> List[Tuple[str, FactorScore]]:
        """Return (factor_name, score) pairs in declared order."""
        return [(name, getattr(self, f"{name}_match")) for name in FACTOR_NAMES]


class MatchOutcome(BaseModel):
    """Compatibility result for a single candidate."""

    model_config = ConfigDict(frozen=True)

    animal_id: str = Field(..., description="Candidate identifier as echoed by the agent")
    animal_name: str = Field(..., description="Candidate name")
    compatibility_score: float = Field(..., ge=0, le=100, description="Overall compatibility (0-100)")
    match_rank: int = Field(..., ge=1, description="Agent-assigned rank, display only")
    compatibility_breakdown: CompatibilityBreakdown
    strengths: Tuple[str, ...] = Field(default_factory=tuple)
    considerations: Tuple[str, ...] = Field(default_factory=tuple)
    recommendation_summary: str = Field(default="")


class AssessmentSummary(BaseModel):
    """Summary of the assessment run."""

    model_config = ConfigDict(frozen=True)

    adopter_profile_summary: str
    animals_evaluated: int = Field(..., ge=0)
    timestamp: str


class OverallInsights(BaseModel):
    """Insights spanning all candidates."""

    model_config = ConfigDict(frozen=True)

    best_match_explanation: str
    adopter_strengths: Tuple[str, ...] = Field(default_factory=tuple)
    important_considerations: Tuple[str, ...] = Field(default_factory=tuple)
    next_steps: Tuple[str, ...] = Field(default_factory=tuple)


class MatchResult(BaseModel):
    """Complete match response payload."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "assessment_summary": {
                    "adopter_profile_summary": "Active remote worker in a house with a yard",
                    "animals_evaluated": 2,
                    "timestamp": "2025-01-01T12:00:00Z"
                },
                "match_recommendations": [
                    {
                        "animal_id": "Max_1735732800000",
                        "animal_name": "Max",
                        "compatibility_score": 91,
                        "match_rank": 1,
                        "compatibility_breakdown": {
                            "energy_match": {"score": 95, "explanation": "Both love long walks"},
                            "space_match": {"score": 90, "explanation": "Yard suits a large dog"},
                            "experience_match": {"score": 85, "explanation": "Basic training needed"},
                            "schedule_match": {"score": 95, "explanation": "Remote work"},
                            "family_match": {"score": 88, "explanation": "Good with kids"},
                            "medical_match": {"score": 100, "explanation": "No special needs"}
                        },
                        "strengths": ["Matching energy levels"],
                        "considerations": ["Needs obedience classes"],
                        "recommendation_summary": "Max is an excellent fit."
                    }
                ],
                "overall_insights": {
                    "best_match_explanation": "Max fits your active lifestyle.",
                    "adopter_strengths": ["Time at home"],
                    "important_considerations": ["Plan for training"],
                    "next_steps": ["Schedule a meet and greet"]
                }
            }
        }
    )

    assessment_summary: AssessmentSummary
    match_recommendations: Tuple[MatchOutcome, ...]
    overall_insights: OverallInsights


class FactorView(BaseModel):
    """Display form of one breakdown factor."""

    key: str
    label: str
    score: float
    score_label: str
    explanation: str


class ResultCard(BaseModel):
    """Simplified result for display, in score order."""

    animal_id: str
    animal_name: str
    display_rank: int
    rank_label: str
    is_top_pick: bool
    score: float
    score_label: str
    summary: str
    top_factors: List[FactorView]
    strengths: List[str]
    considerations: List[str]
    expanded: bool = False
    toggle_label: str = "Show Full Breakdown"
    full_breakdown: Optional[List[FactorView]] = None
