"""
Candidate Registry - Animals Under Assessment
Manages the candidate animals the adopter wants matched, plus the in-progress
entry form.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Iterator, List, Mapping, Optional, Tuple, Union
from loguru import logger

from ..schemas.candidate import CandidateAnimal, CandidateDraft
from ..utils.validators import validate_candidate_data


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CandidateRegistry:
    """
    Ordered collection of committed candidates.

    Insertion order is kept for request serialization only; results are
    displayed in score order.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        """
        Initialize an empty registry.

        Args:
            clock: Source of creation timestamps used in candidate ids
        """
        self._candidates: List[CandidateAnimal] = []
        self._draft = CandidateDraft()
        self._editing = False
        self._clock = clock

    # Draft editing surface

    @property
    def draft(self) -> CandidateDraft:
        return self._draft

    @property
    def is_editing(self) -> bool:
        return self._editing

    def open_editor(self) -> None:
        self._editing = True

    def close_editor(self) -> None:
        """Hide the entry form. The draft is kept."""
        self._editing = False

    def update_draft(self, **fields: Any) -> CandidateDraft:
        """Merge fields into the in-progress candidate entry."""
        self._draft = CandidateDraft(**{**self._draft.model_dump(), **fields})
        return self._draft

    # Committed candidates

    def add(
        self,
        candidate: Optional[Union[CandidateDraft, Mapping[str, Any]]] = None
    ) -> Optional[CandidateAnimal]:
        """
        Commit a candidate to the registry.

        Incomplete entries are ignored without raising. A successful add
        closes the entry form and clears the draft.

        Args:
            candidate: Entry to commit; the current draft when omitted

        Returns:
            The committed CandidateAnimal, or None if the entry was rejected
        """
        if candidate is None:
            candidate = self._draft
        data = candidate.model_dump() if isinstance(candidate, CandidateDraft) else dict(candidate)

        is_valid, error_msg, fields = validate_candidate_data(data)
        if not is_valid:
            logger.debug(f"Candidate not added: {error_msg}")
            return None

        animal = CandidateAnimal(id=self._next_id(fields["name"]), **fields)
        self._candidates.append(animal)

        self._editing = False
        self._draft = CandidateDraft()

        logger.info(f"Added candidate {animal.id} ({animal.species.value})")
        return animal

    def remove(self, candidate_id: str) -> bool:
        """
        Remove the candidate with the given id.

        Returns:
            True if a candidate was removed
        """
        for index, animal in enumerate(self._candidates):
            if animal.id == candidate_id:
                del self._candidates[index]
                logger.info(f"Removed candidate {candidate_id}")
                return True

        logger.debug(f"Candidate {candidate_id} not found; nothing removed")
        return False

    def list(self) -> Tuple[CandidateAnimal, ...]:
        """Get candidates in insertion order."""
        return tuple(self._candidates)

    def clear(self) -> None:
        """Remove every candidate and reset the entry form."""
        self._candidates.clear()
        self._draft = CandidateDraft()
        self._editing = False

    def get(self, candidate_id: str) -> Optional[CandidateAnimal]:
        return next((a for a in self._candidates if a.id == candidate_id), None)

    def _next_id(self, name: str) -> str:
        """Build a '{name}_{epoch_ms}' id that is unique within the registry."""
        stamp = int(self._clock().timestamp() * 1000)
        existing = {animal.id for animal in self._candidates}
        candidate_id = f"{name}_{stamp}"
        while candidate_id in existing:
            stamp += 1
            candidate_id = f"{name}_{stamp}"
        return candidate_id

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[CandidateAnimal]:
        return iter(self.list())

    def __contains__(self, candidate_id: object) -> bool:
        return any(animal.id == candidate_id for animal in self._candidates)
