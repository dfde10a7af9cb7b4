"""Field-level edits on the assessment state, and the live editing session.

Every edit clamps numbers into range, refuses changes outside the fixed
catalogs, and stamps lastUpdatedISO when it applies. Edits return whether they
were applied; rejected edits are logged and leave the state untouched.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Literal

import httpx

from signal_os.core.forces.catalog import get_checklist
from signal_os.core.forces.types import (
    REVENUE_POTENTIAL_MAX,
    REVENUE_POTENTIAL_MIN,
    SCORE_MAX,
    SCORE_MIN,
    AssessmentState,
    ForceId,
    clamp,
)
from signal_os.core.logging import get_logger, log_with_context
from signal_os.core.report_builder import (
    ReportSnapshot,
    build_audit_url,
    build_report,
    export_report,
    summary_text,
)
from signal_os.db import assessment_store
from signal_os.db.storage import Storage
from signal_os.services.transmission_service import TransmissionResult, send_report

logger = get_logger(__name__)

SubjectField = Literal["name", "email", "website"]
SUBJECT_FIELDS: tuple[str, ...] = ("name", "email", "website")


def _touch(state: AssessmentState) -> None:
    state.last_updated_iso = datetime.now(UTC).isoformat()


def _force(force: ForceId | str) -> ForceId | None:
    try:
        return ForceId(force)
    except ValueError:
        logger.warning(f"Rejected edit for unknown force {force!r}")
        return None


def _number(value: float, low: int, high: int) -> int | None:
    try:
        return clamp(value, low, high)
    except ValueError:
        logger.warning(f"Rejected non-numeric value {value!r}")
        return None


# =============================================================================
# Subject and revenue potential
# =============================================================================


def set_subject_field(state: AssessmentState, field: SubjectField | str, value: str) -> bool:
    if field not in SUBJECT_FIELDS:
        logger.warning(f"Rejected edit for unknown subject field {field!r}")
        return False
    setattr(state.subject, field, str(value))
    _touch(state)
    return True


def set_revenue_potential(state: AssessmentState, value: float) -> bool:
    """Set revenue potential, rounded and clamped to [1, 5]."""
    rating = _number(value, REVENUE_POTENTIAL_MIN, REVENUE_POTENTIAL_MAX)
    if rating is None:
        return False
    state.revenue_potential = rating
    _touch(state)
    return True


# =============================================================================
# Scores
# =============================================================================


def set_score(state: AssessmentState, force: ForceId | str, value: float) -> bool:
    """Set a force score, rounded and clamped to [0, 100]."""
    force_id = _force(force)
    score = _number(value, SCORE_MIN, SCORE_MAX)
    if force_id is None or score is None:
        return False
    state.scores[force_id] = score
    _touch(state)
    return True


# =============================================================================
# Evidence
# =============================================================================


def add_evidence_link(state: AssessmentState, force: ForceId | str, url: str = "") -> bool:
    """Append a link slot (empty by default) to a force's evidence."""
    force_id = _force(force)
    if force_id is None:
        return False
    state.evidence[force_id].links.append(str(url))
    _touch(state)
    return True


def update_evidence_link(
    state: AssessmentState, force: ForceId | str, index: int, url: str
) -> bool:
    force_id = _force(force)
    if force_id is None:
        return False
    links = state.evidence[force_id].links
    if not 0 <= index < len(links):
        log_with_context(
            logger, logging.WARNING, "Rejected evidence update", force=force_id.value, index=index
        )
        return False
    links[index] = str(url)
    _touch(state)
    return True


def remove_evidence_link(state: AssessmentState, force: ForceId | str, index: int) -> bool:
    """
    Remove a link slot from a force's evidence.

    The last remaining slot is never removed.

    Args:
        state: Assessment to edit
        force: Force id
        index: Position of the slot to remove

    Returns:
        True if a slot was removed
    """
    force_id = _force(force)
    if force_id is None:
        return False
    links = state.evidence[force_id].links
    if len(links) <= 1 or not 0 <= index < len(links):
        log_with_context(
            logger,
            logging.WARNING,
            "Rejected evidence removal",
            force=force_id.value,
            index=index,
            slots=len(links),
        )
        return False
    del links[index]
    _touch(state)
    return True


def set_evidence_notes(state: AssessmentState, force: ForceId | str, notes: str) -> bool:
    force_id = _force(force)
    if force_id is None:
        return False
    state.evidence[force_id].notes = str(notes)
    _touch(state)
    return True


# =============================================================================
# Checklist (definition of done)
# =============================================================================


def toggle_check(state: AssessmentState, force: ForceId | str, key: str) -> bool:
    """Flip one checklist item. Keys outside the force's catalog are rejected."""
    force_id = _force(force)
    if force_id is None:
        return False
    if key not in {item.key for item in get_checklist(force_id)}:
        log_with_context(
            logger, logging.WARNING, "Rejected unknown checklist key", force=force_id.value, key=key
        )
        return False
    checks = state.dod[force_id].checks
    checks[key] = not checks.get(key, False)
    _touch(state)
    return True


def set_checklist_notes(state: AssessmentState, force: ForceId | str, notes: str) -> bool:
    force_id = _force(force)
    if force_id is None:
        return False
    state.dod[force_id].notes = str(notes)
    _touch(state)
    return True


# =============================================================================
# Live session
# =============================================================================


class AssessmentSession:
    """The one live assessment, written through to storage after every applied edit."""

    def __init__(self, storage: Storage | None = None) -> None:
        self.storage = storage
        self.state = assessment_store.load_or_create(storage)

    def _commit(self, applied: bool) -> bool:
        if applied:
            assessment_store.save(self.state, self.storage)
        return applied

    def set_subject_field(self, field: SubjectField | str, value: str) -> bool:
        return self._commit(set_subject_field(self.state, field, value))

    def set_revenue_potential(self, value: float) -> bool:
        return self._commit(set_revenue_potential(self.state, value))

    def set_score(self, force: ForceId | str, value: float) -> bool:
        return self._commit(set_score(self.state, force, value))

    def add_evidence_link(self, force: ForceId | str, url: str = "") -> bool:
        return self._commit(add_evidence_link(self.state, force, url))

    def update_evidence_link(self, force: ForceId | str, index: int, url: str) -> bool:
        return self._commit(update_evidence_link(self.state, force, index, url))

    def remove_evidence_link(self, force: ForceId | str, index: int) -> bool:
        return self._commit(remove_evidence_link(self.state, force, index))

    def set_evidence_notes(self, force: ForceId | str, notes: str) -> bool:
        return self._commit(set_evidence_notes(self.state, force, notes))

    def toggle_check(self, force: ForceId | str, key: str) -> bool:
        return self._commit(toggle_check(self.state, force, key))

    def set_checklist_notes(self, force: ForceId | str, notes: str) -> bool:
        return self._commit(set_checklist_notes(self.state, force, notes))

    def reset(self) -> AssessmentState:
        """Discard the assessment and start over from an empty one."""
        self.state = assessment_store.reset(self.storage)
        return self.state

    # Report surfaces all read the same snapshot

    def report(self) -> ReportSnapshot:
        return build_report(self.state)

    def export(self, directory: str | Path | None = None) -> Path:
        return export_report(self.report(), directory)

    def summary(self) -> str:
        return summary_text(self.report())

    def audit_url(self) -> str:
        return build_audit_url(self.report())

    async def transmit(self, client: httpx.AsyncClient | None = None) -> TransmissionResult:
        return await send_report(self.report(), client=client)
