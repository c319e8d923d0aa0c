"""
Result Projector - Match Presentation
Ranks the agent's match recommendations and derives the per-result views.
"""

from typing import Any, List, Optional, Tuple
from loguru import logger

from ..config import get_settings
from ..schemas.match_result import (
    AssessmentSummary,
    FactorScore,
    FactorView,
    MatchOutcome,
    MatchResult,
    OverallInsights,
    ResultCard,
)
from ..utils.helpers import format_factor_name, format_score
from ..utils.validators import validate_match_response


class ResultProjector:
    """
    Read-only view over a validated match result.

    Nothing is cached: rank order and top factors are recomputed from the
    frozen MatchResult on every call.
    """

    def __init__(self, result: MatchResult):
        self.result = result

    @classmethod
    def from_response(cls, raw: Any) -> Optional["ResultProjector"]:
        """
        Build a projector from a raw agent response.

        Args:
            raw: Tagged agent response

        Returns:
            ResultProjector, or None if the response is malformed
        """
        is_valid, error_msg, result = validate_match_response(raw)
        if not is_valid:
            logger.warning(f"Discarding match response: {error_msg}")
            return None
        return cls(result)

    @property
    def summary(self) -> AssessmentSummary:
        return self.result.assessment_summary

    @property
    def insights(self) -> OverallInsights:
        return self.result.overall_insights

    @property
    def headline(self) -> str:
        return f"{self.summary.animals_evaluated} animals evaluated based on your profile"

    def rank(self) -> List[MatchOutcome]:
        """
        Order outcomes by compatibility score, highest first.

        The agent's match_rank is a label only and plays no part in ordering.
        Ties keep the order the agent returned them in.
        """
        return sorted(
            self.result.match_recommendations,
            key=lambda outcome: outcome.compatibility_score,
            reverse=True,
        )

    @staticmethod
    def top_factors(outcome: MatchOutcome, k: int = 3) -> List[Tuple[str, FactorScore]]:
        """
        Select the k highest-scoring breakdown factors.

        Args:
            outcome: Match outcome
            k: Number of factors to return

        Returns:
            (factor_name, FactorScore) pairs, highest score first; ties keep
            declared factor order
        """
        factors = sorted(
            outcome.compatibility_breakdown.factors(),
            key=lambda item: item[1].score,
            reverse=True,
        )
        return factors[:max(k, 0)]

    @staticmethod
    def toggle_expanded(current_id: Optional[str], result_id: str) -> Optional[str]:
        """Collapse the result if it is open, otherwise open it instead."""
        return None if current_id == result_id else result_id

    def cards(
        self,
        expanded_result_id: Optional[str] = None,
        top_k: Optional[int] = None
    ) -> List[ResultCard]:
        """
        Build display cards in score order.

        Args:
            expanded_result_id: Result whose full breakdown is shown
            top_k: Number of highlighted factors (default from settings)

        Returns:
            List of ResultCard objects
        """
        if top_k is None:
            top_k = get_settings().top_factors_count

        cards = []
        for display_rank, outcome in enumerate(self.rank(), start=1):
            expanded = outcome.animal_id == expanded_result_id
            cards.append(ResultCard(
                animal_id=outcome.animal_id,
                animal_name=outcome.animal_name,
                display_rank=display_rank,
                rank_label=f"Rank #{outcome.match_rank}",
                is_top_pick=outcome.match_rank == 1,
                score=outcome.compatibility_score,
                score_label=format_score(outcome.compatibility_score),
                summary=outcome.recommendation_summary,
                top_factors=[
                    _factor_view(name, factor)
                    for name, factor in self.top_factors(outcome, top_k)
                ],
                strengths=list(outcome.strengths),
                considerations=list(outcome.considerations),
                expanded=expanded,
                toggle_label="Hide Full Breakdown" if expanded else "Show Full Breakdown",
                full_breakdown=[
                    _factor_view(name, factor)
                    for name, factor in outcome.compatibility_breakdown.factors()
                ] if expanded else None,
            ))

        return cards


def _factor_view(name: str, factor: FactorScore) -> FactorView:
    return FactorView(
        key=name,
        label=format_factor_name(name),
        score=factor.score,
        score_label=format_score(factor.score),
        explanation=factor.explanation,
    )
