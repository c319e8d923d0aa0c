"""
Helper utilities for PawMatch AI.
"""

from enum import Enum
from typing import Optional, Union

ACTIVITY_LABELS = ("Sedentary", "Low", "Moderate", "Active", "Very Active")
EXPERIENCE_LABELS = ("Beginner", "Some Experience", "Intermediate", "Advanced", "Expert")


def band_index(value: int) -> int:
    """
    Discretize a 1-10 slider value into one of five bands.

    Args:
        value: Slider value. Values outside 1-10 clamp into the end bands.

    Returns:
        Band index between 0 and 4
    """
    if value <= 2:
        return 0
    if value <= 4:
        return 1
    if value <= 6:
        return 2
    if value <= 8:
        return 3
    return 4


def activity_label(value: int) -> str:
    """Get the activity label for a 1-10 activity level."""
    return ACTIVITY_LABELS[band_index(value)]


def experience_label(value: int) -> str:
    """Get the experience label for a 1-10 experience level."""
    return EXPERIENCE_LABELS[band_index(value)]


def format_choice(value: Optional[Union[Enum, str]]) -> str:
    """Render an optional choice; unset choices render as empty text."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return value


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' (2.0 -> '2', 2.5 -> '2.5')."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_factor_name(factor: str) -> str:
    """
    Format a breakdown factor key for display.

    Args:
        factor: Factor key, either bare ("energy") or suffixed ("energy_match")

    Returns:
        Display name, e.g. "Energy Match"
    """
    if not factor.endswith("_match"):
        factor = f"{factor}_match"
    return factor.replace("_", " ").title()


def format_score(score: float) -> str:
    """Format a 0-100 score as a percentage label."""
    return f"{format_number(score)}%"
