"""Wizard components for PawMatch AI."""

from .profile_store import ProfileStore
from .candidate_registry import CandidateRegistry
from .match_request_builder import build_match_request, describe_candidate
from .result_projector import ResultProjector

__all__ = [
    "ProfileStore",
    "CandidateRegistry",
    "build_match_request",
    "describe_candidate",
    "ResultProjector",
]
