"""
Input validation and sanitization utilities.
"""

from typing import Any, Dict, Mapping, Optional
from pydantic import ValidationError
from loguru import logger

from ..schemas.candidate import EnergyLevel, Species
from ..schemas.match_result import MatchResult


def sanitize_string(value: Any, max_length: int = 1000) -> str:
    """
    Sanitize free-text input.

    Args:
        value: Input value
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)

    # Remove null bytes
    value = value.replace("\x00", "")

    # Truncate to max length
    value = value[:max_length]

    # Strip leading/trailing whitespace
    value = value.strip()

    return value


def validate_candidate_data(data: Mapping[str, Any]) -> tuple[bool, Optional[str], Dict[str, Any]]:
    """
    Validate a candidate entry before it is committed to the registry.

    Args:
        data: Candidate fields (name, species, age_years, energy_level,
            key_traits, special_needs)

    Returns:
        Tuple of (is_valid, error_message, cleaned_fields)
    """
    name = sanitize_string(data.get("name"), 100)
    key_traits = sanitize_string(data.get("key_traits"), 1000)
    special_needs = sanitize_string(data.get("special_needs"), 1000)
    species = data.get("species")
    energy_level = data.get("energy_level")
    age_years = data.get("age_years")

    if not name:
        return False, "Missing required field: name", {}
    if not key_traits:
        return False, "Missing required field: key_traits", {}

    try:
        species = Species(species)
    except ValueError:
        return False, f"Invalid species: {species!r}", {}

    try:
        energy_level = EnergyLevel(energy_level)
    except ValueError:
        return False, f"Invalid energy level: {energy_level!r}", {}

    if isinstance(age_years, bool) or not isinstance(age_years, int) or age_years <= 0:
        return False, f"Age must be a positive whole number of years, got {age_years!r}", {}

    return True, None, {
        "name": name,
        "species": species,
        "age_years": age_years,
        "energy_level": energy_level,
        "key_traits": key_traits,
        "special_needs": special_needs or None,
    }


def validate_match_response(raw: Any) -> tuple[bool, Optional[str], Optional[MatchResult]]:
    """
    Validate a tagged response from the matching agent.

    A usable response looks like
    ``{"success": true, "response": {"status": "success", "result": {...}}}``
    where ``result`` is a match result object or its JSON encoding.

    Args:
        raw: Decoded response body

    Returns:
        Tuple of (is_valid, error_message, match_result)
    """
    if not isinstance(raw, Mapping):
        return False, f"Response is not an object: {type(raw).__name__}", None

    if raw.get("success") is not True:
        return False, f"Agent call failed: {raw.get('error', 'unknown error')}", None

    response = raw.get("response")
    if not isinstance(response, Mapping):
        return False, "Response payload missing", None

    if response.get("status") != "success":
        return False, f"Agent reported status {response.get('status')!r}", None

    result = response.get("result")
    if not isinstance(result, (str, Mapping)):
        return False, "Result payload missing", None

    try:
        if isinstance(result, str):
            return True, None, MatchResult.model_validate_json(result)
        return True, None, MatchResult.model_validate(dict(result))
    except ValidationError as e:
        logger.warning(f"Match result failed validation: {e}")
        return False, str(e), None
