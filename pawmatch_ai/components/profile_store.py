"""
Profile Store - Questionnaire State
Holds the adopter's lifestyle and environment answers.
"""

from typing import Any
from loguru import logger

from ..schemas.adopter_profile import EnvironmentProfile, LifestyleProfile


class ProfileStore:
    """
    Holds the two adopter questionnaires.

    Updates are shallow merges: only the named fields change. The merged
    profile is validated against the field types and ranges before it replaces
    the current one, so a rejected update leaves the store untouched.
    """

    def __init__(self):
        """Initialize the store with default answers."""
        self._lifestyle = LifestyleProfile()
        self._environment = EnvironmentProfile()

    @property
    def lifestyle(self) -> LifestyleProfile:
        return self._lifestyle

    @property
    def environment(self) -> EnvironmentProfile:
        return self._environment

    def update_lifestyle(self, **changes: Any) -> LifestyleProfile:
        """
        Merge changes into the lifestyle profile.

        Args:
            **changes: Lifestyle fields to overwrite

        Returns:
            Updated LifestyleProfile

        Raises:
            pydantic.ValidationError: If a field is unknown or out of range
        """
        merged = {**self._lifestyle.model_dump(), **changes}
        self._lifestyle = LifestyleProfile.model_validate(merged)
        logger.debug(f"Lifestyle profile updated: {sorted(changes)}")
        return self._lifestyle

    def update_environment(self, **changes: Any) -> EnvironmentProfile:
        """
        Merge changes into the environment profile.

        Args:
            **changes: Environment fields to overwrite

        Returns:
            Updated EnvironmentProfile

        Raises:
            pydantic.ValidationError: If a field is unknown or out of range
        """
        merged = {**self._environment.model_dump(), **changes}
        self._environment = EnvironmentProfile.model_validate(merged)
        logger.debug(f"Environment profile updated: {sorted(changes)}")
        return self._environment

    def reset(self) -> None:
        """Restore both profiles to their defaults."""
        self._lifestyle = LifestyleProfile()
        self._environment = EnvironmentProfile()
        logger.info("Profile store reset to defaults")
