"""Five-force assessment model.

Five fixed forces, each scored 0-100 and tracked against a fixed checklist:
- Essence: What you really stand for
- Identity: How you are perceived
- Offer: What people buy and why
- System: How leads become cash
- Growth: How it scales without chaos

Usage:
    from signal_os.core.forces import AssessmentState, band, rank

    state = AssessmentState()
    primary, secondary = rank(state.scores)
    print(f"{primary.value}: {band(state.scores[primary]).value}")
"""

from signal_os.core.forces.catalog import (
    CHECKLISTS,
    FORCE_ORDER,
    FORCES,
    LEAKS,
    get_checklist,
    get_force,
    get_leak,
)
from signal_os.core.forces.derive import band, completion, is_whale, next_actions, rank
from signal_os.core.forces.types import (
    DEFAULT_SCORE,
    SCHEMA_VERSION,
    AssessmentState,
    Band,
    ChecklistItem,
    ChecklistState,
    Evidence,
    ForceId,
    ForceInfo,
    LeakInfo,
    Subject,
)

__all__ = [
    "AssessmentState",
    "Band",
    "ChecklistItem",
    "ChecklistState",
    "Evidence",
    "ForceId",
    "ForceInfo",
    "LeakInfo",
    "Subject",
    "CHECKLISTS",
    "FORCES",
    "FORCE_ORDER",
    "LEAKS",
    "DEFAULT_SCORE",
    "SCHEMA_VERSION",
    "band",
    "completion",
    "get_checklist",
    "get_force",
    "get_leak",
    "is_whale",
    "next_actions",
    "rank",
]
