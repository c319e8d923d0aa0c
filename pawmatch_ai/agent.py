"""
PawMatch Wizard Controller - Orchestrator
Drives the adopter intake wizard from welcome screen to match results.
"""

from typing import Optional
from loguru import logger

from .config import get_settings
from .components.profile_store import ProfileStore
from .components.candidate_registry import CandidateRegistry
from .components.match_request_builder import build_match_request
from .components.result_projector import ResultProjector
from .schemas.match_result import MatchResult
from .schemas.wizard_state import WizardState, WizardStep
from .utils.api_clients import AgentClient, MatchSubmitter


class WizardController:
    """
    State machine for the intake wizard.

    Steps run Welcome -> Lifestyle -> Environment -> Candidates -> Results.
    The questionnaire steps advance unconditionally; leaving Candidates
    requires at least one candidate and submits the assessment to the match
    coordinator agent. Results can only be left through restart().
    """

    def __init__(
        self,
        submitter: Optional[MatchSubmitter] = None,
        profile_store: Optional[ProfileStore] = None,
        registry: Optional[CandidateRegistry] = None,
    ):
        """
        Initialize the controller.

        Args:
            submitter: Matching agent capability (defaults to AgentClient)
            profile_store: Questionnaire store
            registry: Candidate registry
        """
        self.settings = get_settings()
        self.submitter = submitter or AgentClient()
        self.profile_store = profile_store or ProfileStore()
        self.registry = registry or CandidateRegistry()
        self._state = WizardState()
        self._results: Optional[MatchResult] = None

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def step(self) -> WizardStep:
        return self._state.step

    @property
    def results(self) -> Optional[MatchResult]:
        return self._results

    @property
    def projector(self) -> Optional[ResultProjector]:
        """Projector over the stored results, if any."""
        if self._results is None:
            return None
        return ResultProjector(self._results)

    @property
    def can_find_matches(self) -> bool:
        return (
            self._state.step == WizardStep.CANDIDATES
            and len(self.registry) > 0
            and not self._state.loading
        )

    async def advance(self) -> bool:
        """
        Move forward one step.

        From Candidates this submits the assessment; see find_matches().

        Returns:
            True if the step changed
        """
        step = self._state.step

        if step == WizardStep.CANDIDATES:
            return await self.find_matches()

        if step == WizardStep.RESULTS:
            logger.debug("Already on results; restart to begin again")
            return False

        self._set_step(WizardStep(step + 1))
        return True

    async def find_matches(self) -> bool:
        """
        Submit the assessment and move to Results on success.

        Only one submission may be in flight. Any failure (transport error,
        malformed response or unexpected exception) leaves the wizard on
        Candidates with no results stored.

        Returns:
            True if results were received and the wizard moved to Results
        """
        if not self.can_find_matches:
            logger.debug(
                f"Find matches ignored: step={self._state.step.name}, "
                f"candidates={len(self.registry)}, loading={self._state.loading}"
            )
            return False

        self._state = self._state.model_copy(update={"loading": True})

        try:
            message = build_match_request(
                self.profile_store.lifestyle,
                self.profile_store.environment,
                self.registry.list(),
            )
            logger.info(f"Requesting matches for {len(self.registry)} candidates")

            raw = await self.submitter.submit(message, self.settings.match_coordinator_agent_id)
            projector = ResultProjector.from_response(raw)

        except Exception as e:
            logger.error(f"Error finding matches: {e}")
            projector = None

        if projector is None:
            self._state = self._state.model_copy(update={"loading": False})
            return False

        self._results = projector.result
        self._state = WizardState(step=WizardStep.RESULTS)

        logger.info(f"Received {len(self._results.match_recommendations)} match recommendations")
        return True

    def retreat(self) -> bool:
        """
        Move back one step from Lifestyle, Environment or Candidates.

        Returns:
            True if the step changed
        """
        if self._state.loading:
            logger.debug("Retreat ignored while a submission is in flight")
            return False

        step = self._state.step
        if step in (WizardStep.WELCOME, WizardStep.RESULTS):
            logger.debug(f"Retreat ignored from {step.name}")
            return False

        self._set_step(WizardStep(step - 1))
        return True

    def restart(self) -> bool:
        """
        Return to Welcome and discard every answer, candidate and result.

        Returns:
            True if the wizard was reset
        """
        if self._state.loading:
            logger.debug("Restart ignored while a submission is in flight")
            return False

        self.profile_store.reset()
        self.registry.clear()
        self._results = None
        self._state = WizardState()

        logger.info("Wizard restarted")
        return True

    def toggle_expanded(self, result_id: str) -> Optional[str]:
        """
        Expand a result's full breakdown, or collapse it if already open.

        Returns:
            The expanded result id, or None
        """
        expanded = ResultProjector.toggle_expanded(self._state.expanded_result_id, result_id)
        self._state = self._state.model_copy(update={"expanded_result_id": expanded})
        return expanded

    def _set_step(self, step: WizardStep) -> None:
        logger.info(f"Wizard step {self._state.step.name} -> {step.name}")
        self._state = self._state.model_copy(update={"step": step})
