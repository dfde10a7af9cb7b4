"""Derived values: bands, weakest-force ranking, whale flag, checklist progress.

Pure functions of the assessment state. Always computed fresh (no caching),
never raise for in-catalog forces.
"""

from collections.abc import Mapping

from signal_os.core.forces.catalog import FORCE_ORDER, get_checklist
from signal_os.core.forces.types import (
    DEFAULT_SCORE,
    SCORE_MAX,
    SCORE_MIN,
    WHALE_THRESHOLD,
    Band,
    ChecklistItem,
    ChecklistState,
    ForceId,
    round_half_up,
)

# Lower bound (inclusive) of each band, checked from the top down
BAND_FLOORS: tuple[tuple[int, Band], ...] = (
    (80, Band.STRONG),
    (60, Band.OK),
    (40, Band.FRICTION),
)


def band(score: float) -> Band:
    """
    Classify a score into its band.

    The score is clamped to [0, 100] and rounded to the nearest integer first,
    so 39.5 is FRICTION and 140 is STRONG. NaN reads as 0.

    Args:
        score: Force score

    Returns:
        CRITICAL (<40), FRICTION (<60), OK (<80) or STRONG
    """
    if score != score or score <= SCORE_MIN:
        value = SCORE_MIN
    elif score >= SCORE_MAX:
        value = SCORE_MAX
    else:
        value = round_half_up(score)
    for floor, label in BAND_FLOORS:
        if value >= floor:
            return label
    return Band.CRITICAL


def rank(scores: Mapping[ForceId, int]) -> tuple[ForceId, ForceId]:
    """
    Find the weakest (primary) and second weakest (secondary) forces.

    Sorts ascending by score; ties go to the force listed first in FORCE_ORDER.
    Forces missing from the mapping read as the default score.

    Args:
        scores: Score per force

    Returns:
        (primary, secondary) force ids
    """
    ordered = sorted(
        FORCE_ORDER,
        key=lambda force: (scores.get(force, DEFAULT_SCORE), FORCE_ORDER.index(force)),
    )
    return ordered[0], ordered[1]


def is_whale(revenue_potential: int) -> bool:
    """A subject rated 4 or 5 on revenue potential is a whale."""
    return revenue_potential >= WHALE_THRESHOLD


def completion(force: ForceId, checklist: ChecklistState) -> int:
    """Percentage of the force's checklist items that are checked (0 for an empty catalog)."""
    items = get_checklist(force)
    if not items:
        return 0
    done = sum(1 for item in items if checklist.checks.get(item.key, False))
    return round_half_up(100 * done / len(items))


def next_actions(
    force: ForceId,
    checklist: ChecklistState,
    limit: int = 3,
) -> list[ChecklistItem]:
    """
    First unchecked checklist items for a force, in catalog order.

    Args:
        force: Force id
        checklist: That force's checklist state
        limit: Maximum number of items to return

    Returns:
        Up to `limit` open items; empty when everything is done
    """
    if limit <= 0:
        return []
    open_items = [item for item in get_checklist(force) if not checklist.checks.get(item.key, False)]
    return open_items[:limit]
