"""Pydantic models and enums for the five-force assessment."""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Catalog Types
# =============================================================================


class ForceId(str, Enum):
    """The five fixed business forces, declared in tie-break priority order."""

    ESSENCE = "essence"
    IDENTITY = "identity"
    OFFER = "offer"
    SYSTEM = "system"
    GROWTH = "growth"


class Band(str, Enum):
    """Score band derived from a force score."""

    CRITICAL = "CRITICAL"  # 0-39
    FRICTION = "FRICTION"  # 40-59
    OK = "OK"  # 60-79
    STRONG = "STRONG"  # 80-100


class ForceInfo(BaseModel):
    """Display metadata for a force."""

    model_config = ConfigDict(frozen=True)

    id: ForceId
    label: str = Field(..., description="Display label (e.g., 'ESSENCE')")
    hint: str = Field(..., description="One-line description of what the force covers")
    reference_url: str = Field(..., description="External reference link")


class ChecklistItem(BaseModel):
    """A fixed completion criterion (definition of done) for a force."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Stable key, unique within its force")
    label: str


class LeakInfo(BaseModel):
    """Diagnostic copy shown when a force is the primary leak."""

    model_config = ConfigDict(frozen=True)

    leak_name: str = Field(..., serialization_alias="leakName")
    human_symptom: str = Field(..., serialization_alias="humanSymptom")
    what_it_means: str = Field(..., serialization_alias="whatItMeans")
    today_move: str = Field(..., serialization_alias="todayMove")
    week_plan: tuple[str, ...] = Field(..., serialization_alias="weekPlan")
    if_you_dont: str = Field(..., serialization_alias="ifYouDont")
    if_you_do: str = Field(..., serialization_alias="ifYouDo")


# =============================================================================
# Assessment State Types
# =============================================================================

SCHEMA_VERSION = 1

SCORE_MIN = 0
SCORE_MAX = 100
DEFAULT_SCORE = 50

REVENUE_POTENTIAL_MIN = 1
REVENUE_POTENTIAL_MAX = 5
WHALE_THRESHOLD = 4


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 rounding up (3.5 -> 4, -3.5 -> -3)."""
    return math.floor(value + 0.5)


def clamp(value: Any, low: int, high: int) -> int:
    """Round and clamp a number into [low, high].

    Integers of any size saturate at the range ends.

    Raises:
        ValueError: If value is not a finite number
    """
    if isinstance(value, int):
        return max(low, min(high, value))
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return max(low, min(high, round_half_up(number)))


class Subject(BaseModel):
    """Who is being assessed. Free text, all optional."""

    name: str = ""
    email: str = ""
    website: str = ""


class Evidence(BaseModel):
    """Evidence links and notes for a single force."""

    notes: str = ""
    links: list[str] = Field(default_factory=lambda: [""])

    @field_validator("links")
    @classmethod
    def at_least_one_slot(cls, v: list[str]) -> list[str]:
        """Keep at least one (possibly empty) link slot."""
        return v or [""]


class ChecklistState(BaseModel):
    """Completion flags and notes for a single force's checklist."""

    checks: dict[str, bool] = Field(default_factory=dict)
    notes: str = ""


def _by_force(raw: Any) -> dict[str, Any]:
    """Key a raw per-force mapping by force value, dropping unknown forces."""
    if not isinstance(raw, dict):
        return {}
    valid = {force.value for force in ForceId}
    out = {}
    for key, value in raw.items():
        key = key.value if isinstance(key, ForceId) else key
        if key in valid:
            out[key] = value
    return out


class AssessmentState(BaseModel):
    """The whole self-assessment: the single unit of mutation and persistence."""

    model_config = ConfigDict(populate_by_name=True)

    version: int = SCHEMA_VERSION
    subject: Subject = Field(default_factory=Subject)
    revenue_potential: int = Field(default=REVENUE_POTENTIAL_MIN, alias="revenuePotential")
    scores: dict[ForceId, int] = Field(default_factory=dict, validate_default=True)
    evidence: dict[ForceId, Evidence] = Field(default_factory=dict)
    dod: dict[ForceId, ChecklistState] = Field(default_factory=dict)
    last_updated_iso: str = Field(default="", alias="lastUpdatedISO")

    @field_validator("revenue_potential", mode="before")
    @classmethod
    def clamp_revenue_potential(cls, v: Any) -> int:
        return clamp(v, REVENUE_POTENTIAL_MIN, REVENUE_POTENTIAL_MAX)

    @field_validator("scores", mode="before")
    @classmethod
    def clamp_scores(cls, v: Any) -> dict[str, int]:
        """Fill missing forces with the default score and clamp every score."""
        raw = _by_force(v)
        return {
            force.value: clamp(raw.get(force.value, DEFAULT_SCORE), SCORE_MIN, SCORE_MAX)
            for force in ForceId
        }

    @field_validator("evidence", "dod", mode="before")
    @classmethod
    def known_forces_only(cls, v: Any) -> dict[str, Any]:
        return _by_force(v)

    @model_validator(mode="after")
    def fill_forces(self) -> "AssessmentState":
        """Give every force evidence, and a checklist keyed exactly by its catalog."""
        from signal_os.core.forces.catalog import get_checklist

        self.evidence = {force: self.evidence.get(force, Evidence()) for force in ForceId}

        aligned: dict[ForceId, ChecklistState] = {}
        for force in ForceId:
            current = self.dod.get(force) or ChecklistState()
            checks = {
                item.key: bool(current.checks.get(item.key, False))
                for item in get_checklist(force)
            }
            aligned[force] = ChecklistState(checks=checks, notes=current.notes)
        self.dod = aligned
        return self

    def to_storage_dict(self) -> dict[str, Any]:
        """Serialize using the storage record's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)
