"""
Wizard step and state models.
"""

from enum import IntEnum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class WizardStep(IntEnum):
    """Intake wizard steps, in order."""
    WELCOME = 0
    LIFESTYLE = 1
    ENVIRONMENT = 2
    CANDIDATES = 3
    RESULTS = 4


TOTAL_STEPS = len(WizardStep)


class WizardState(BaseModel):
    """
    Snapshot of the wizard's navigation state.

    The controller never mutates a state in place; every transition replaces
    it with a new value.
    """

    model_config = ConfigDict(frozen=True)

    step: WizardStep = Field(default=WizardStep.WELCOME, description="Current step")
    loading: bool = Field(default=False, description="A match submission is in flight")
    expanded_result_id: Optional[str] = Field(
        default=None,
        description="Result whose full breakdown is shown, if any"
    )

    @property
    def progress_percentage(self) -> float:
        """Progress through the wizard as a percentage (0-100)."""
        return self.step / (TOTAL_STEPS - 1) * 100

    @property
    def step_label(self) -> str:
        """Progress label shown above each questionnaire step."""
        return f"Step {int(self.step)} of {TOTAL_STEPS - 1}"
