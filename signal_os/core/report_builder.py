"""Report snapshot: the assessment plus every derived value.

One snapshot feeds every outbound surface (on-screen, clipboard, file export,
transmission) so they always agree.
"""

import re
from datetime import UTC, datetime
from pathlib import Path
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from signal_os.core.config import get_settings
from signal_os.core.forces.catalog import FORCE_ORDER, get_force, get_leak
from signal_os.core.forces.derive import band, completion, is_whale, next_actions, rank
from signal_os.core.forces.types import (
    AssessmentState,
    Band,
    ChecklistItem,
    ChecklistState,
    Evidence,
    ForceId,
    LeakInfo,
    Subject,
)
from signal_os.core.logging import get_logger

logger = get_logger(__name__)

EXPORT_PREFIX = "signal_os"
DEFAULT_EXPORT_TOKEN = "assessment"


class ReportSnapshot(BaseModel):
    """Read-only projection of an assessment and its derived values."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    generated_at_iso: str = Field(..., alias="generatedAtISO")
    version: int
    subject: Subject
    revenue_potential: int = Field(..., alias="revenuePotential")
    is_whale: bool = Field(..., alias="isWhale")
    scores: dict[ForceId, int]
    bands: dict[ForceId, Band]
    primary_force: ForceId = Field(..., alias="primaryForce")
    secondary_force: ForceId = Field(..., alias="secondaryForce")
    evidence: dict[ForceId, Evidence]
    dod: dict[ForceId, ChecklistState]
    completion: dict[ForceId, int]
    next_actions: tuple[ChecklistItem, ...] = Field(..., alias="nextActions")
    primary_leak: LeakInfo = Field(..., alias="primaryLeak")
    last_updated_iso: str = Field(..., alias="lastUpdatedISO")


def build_report(state: AssessmentState, generated_at: datetime | None = None) -> ReportSnapshot:
    """
    Build the report snapshot for an assessment.

    Args:
        state: Current assessment
        generated_at: Build time (defaults to now)

    Returns:
        ReportSnapshot with scores, bands, ranking, whale flag and checklist progress
    """
    built = generated_at or datetime.now(UTC)
    primary, secondary = rank(state.scores)

    return ReportSnapshot(
        generated_at_iso=built.isoformat(),
        version=state.version,
        subject=state.subject.model_copy(),
        revenue_potential=state.revenue_potential,
        is_whale=is_whale(state.revenue_potential),
        scores={force: state.scores[force] for force in FORCE_ORDER},
        bands={force: band(state.scores[force]) for force in FORCE_ORDER},
        primary_force=primary,
        secondary_force=secondary,
        evidence={force: state.evidence[force].model_copy(deep=True) for force in FORCE_ORDER},
        dod={force: state.dod[force].model_copy(deep=True) for force in FORCE_ORDER},
        completion={force: completion(force, state.dod[force]) for force in FORCE_ORDER},
        next_actions=next_actions(primary, state.dod[primary]),
        primary_leak=get_leak(primary),
        last_updated_iso=state.last_updated_iso,
    )


def report_to_json(report: ReportSnapshot, indent: int | None = 2) -> str:
    """Serialize a report with camelCase keys (clipboard copy, export, raw_json)."""
    return report.model_dump_json(by_alias=True, indent=indent)


def export_filename(name: str) -> str:
    """
    File name for a report export.

    Lowercases the subject name and collapses whitespace runs to one underscore;
    an empty name falls back to a fixed token.

    Examples:
        "Acme  Studio" -> "signal_os_acme_studio.json"
        "" -> "signal_os_assessment.json"
    """
    token = re.sub(r"\s+", "_", name.strip().lower())
    token = re.sub(r"[\\/]", "_", token)
    return f"{EXPORT_PREFIX}_{token or DEFAULT_EXPORT_TOKEN}.json"


def export_report(report: ReportSnapshot, directory: str | Path | None = None) -> Path:
    """
    Write a report as JSON.

    Args:
        report: Report to export
        directory: Target directory (defaults to EXPORT_DIR)

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    target_dir = Path(directory) if directory is not None else Path(get_settings().EXPORT_DIR)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / export_filename(report.subject.name)
    path.write_text(report_to_json(report), encoding="utf-8")
    logger.info(f"Exported report to {path}")
    return path


def summary_text(report: ReportSnapshot) -> str:
    """Short plain-text summary for sharing."""
    leak = report.primary_leak
    scores = " | ".join(
        f"{get_force(force).label} {report.scores[force]} ({report.bands[force].value})"
        for force in FORCE_ORDER
    )
    lines = [
        "QTMBG - Signal OS",
        f"Primary leak: {leak.leak_name} ({get_force(report.primary_force).label})",
        f"Secondary: {get_force(report.secondary_force).label}",
        leak.human_symptom,
        "",
        f"Today move: {leak.today_move}",
        f"Scores: {scores}",
    ]
    if report.subject.name:
        lines.insert(1, f"For: {report.subject.name}")
    return "\n".join(lines) + "\n"


def build_audit_url(report: ReportSnapshot, base_url: str | None = None) -> str:
    """
    Deep link into the audit booking page, pre-filled from the report.

    Args:
        report: Report to hand off
        base_url: Audit page URL (defaults to AUDIT_URL)

    Returns:
        URL with from/primary/secondary/scores and any non-empty subject fields
    """
    params = {
        "from": "signal",
        "primary": report.primary_force.value,
        "secondary": report.secondary_force.value,
        "scores": ",".join(f"{force.value}-{report.scores[force]}" for force in FORCE_ORDER),
    }
    for field in ("name", "email", "website"):
        value = getattr(report.subject, field)
        if value:
            params[field] = value

    return f"{base_url or get_settings().AUDIT_URL}?{urlencode(params)}"
