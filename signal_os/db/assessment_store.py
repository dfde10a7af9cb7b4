"""Persistence gateway: the whole assessment in one versioned storage slot.

Best-effort by contract. Storage and parse failures are logged and absorbed so
the interactive flow never blocks on persistence. Two writers against the same
slot race and the last write wins.
"""

import json
from typing import Any

from pydantic import ValidationError

from signal_os.core.config import get_settings
from signal_os.core.forces.types import SCHEMA_VERSION, AssessmentState
from signal_os.core.logging import get_logger
from signal_os.db.storage import Storage, get_storage

logger = get_logger(__name__)


def _slot(storage: Storage | None) -> tuple[Storage, str]:
    if storage is None:
        storage = get_storage()
    return storage, get_settings().STORAGE_KEY


def _migrate(raw: dict[str, Any]) -> dict[str, Any] | None:
    """
    Bring a stored blob up to SCHEMA_VERSION.

    Only version 1 exists; anything else is treated as no prior state.

    Args:
        raw: Parsed storage record

    Returns:
        Record in the current schema, or None if it cannot be migrated
    """
    version = raw.get("version")
    if version == SCHEMA_VERSION:
        return raw
    logger.warning(f"Discarding stored assessment with unsupported version {version!r}")
    return None


def load(storage: Storage | None = None) -> AssessmentState | None:
    """
    Read the stored assessment.

    Args:
        storage: Storage backend (defaults to the configured file storage)

    Returns:
        AssessmentState, or None when nothing usable is stored
    """
    store, key = _slot(storage)
    try:
        blob = store.get_item(key)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Storage unavailable, starting fresh: {e}")
        return None

    if not blob:
        return None

    try:
        raw = json.loads(blob)
    except ValueError as e:
        logger.warning(f"Stored assessment is not valid JSON, starting fresh: {e}")
        return None

    if not isinstance(raw, dict):
        logger.warning("Stored assessment is not an object, starting fresh")
        return None

    migrated = _migrate(raw)
    if migrated is None:
        return None

    try:
        state = AssessmentState.model_validate(migrated)
    except ValidationError as e:
        logger.warning(f"Stored assessment failed validation, starting fresh: {e.error_count()} errors")
        return None

    logger.debug(f"Loaded assessment from slot {key}")
    return state


def save(state: AssessmentState, storage: Storage | None = None) -> None:
    """
    Overwrite the slot with the full assessment. Failures are logged, not raised.

    Args:
        state: Assessment to persist
        storage: Storage backend (defaults to the configured file storage)
    """
    store, key = _slot(storage)
    payload = state.to_storage_dict()
    payload["version"] = SCHEMA_VERSION
    try:
        store.set_item(key, json.dumps(payload))
    except OSError as e:
        logger.warning(f"Failed to save assessment to slot {key}: {e}")


def reset(storage: Storage | None = None) -> AssessmentState:
    """
    Delete the stored assessment.

    Args:
        storage: Storage backend (defaults to the configured file storage)

    Returns:
        A fresh, empty AssessmentState
    """
    store, key = _slot(storage)
    try:
        store.remove_item(key)
    except OSError as e:
        logger.warning(f"Failed to clear slot {key}: {e}")
    logger.info("Assessment reset")
    return AssessmentState()


def load_or_create(storage: Storage | None = None) -> AssessmentState:
    """Stored assessment, or a fresh one when nothing usable is stored."""
    state = load(storage)
    return state if state is not None else AssessmentState()
