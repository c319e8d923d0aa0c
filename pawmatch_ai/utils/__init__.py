"""Utility modules for PawMatch AI."""

from .api_clients import AgentClient, MatchSubmitter
from .validators import validate_candidate_data, validate_match_response
from .helpers import activity_label, experience_label, band_index

__all__ = [
    "AgentClient",
    "MatchSubmitter",
    "validate_candidate_data",
    "validate_match_response",
    "activity_label",
    "experience_label",
    "band_index",
]
