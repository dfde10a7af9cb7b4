"""Outbound report submission to an optional remote collector.

Fire-and-forget: the collector's response is never inspected, so a request
that leaves the process counts as sent. Only transport errors are reported as
failures. No retries, no queueing.
"""

from datetime import UTC, datetime
from typing import Any, Literal
from uuid import uuid4

import httpx
from pydantic import BaseModel

from signal_os.core.config import get_settings
from signal_os.core.forces.catalog import FORCE_ORDER
from signal_os.core.logging import get_logger
from signal_os.core.report_builder import ReportSnapshot, report_to_json

logger = get_logger(__name__)


class TransmissionResult(BaseModel):
    """Outcome of a submission attempt."""

    ok: bool
    reason: Literal["missing_endpoint", "network"] | None = None


def build_transmission_payload(
    report: ReportSnapshot,
    submit_id: str | None = None,
    timestamp: datetime | None = None,
) -> dict[str, Any]:
    """
    Flatten a report into the collector's submission fields.

    Args:
        report: Report to send
        submit_id: Submission id (generated when omitted)
        timestamp: Submission time (defaults to now)

    Returns:
        Flat dict with subject fields, per-force scores, ranking, whale flag
        and the full report as `raw_json`
    """
    payload: dict[str, Any] = {
        "submit_id": submit_id or str(uuid4()),
        "timestamp_iso": (timestamp or datetime.now(UTC)).isoformat(),
        "subject_name": report.subject.name,
        "subject_email": report.subject.email,
        "subject_website": report.subject.website,
        "revenue_potential": report.revenue_potential,
        "is_whale": report.is_whale,
    }
    for force in FORCE_ORDER:
        payload[f"score_{force.value}"] = report.scores[force]
    payload["primary_force"] = report.primary_force.value
    payload["secondary_force"] = report.secondary_force.value
    payload["raw_json"] = report_to_json(report, indent=None)
    return payload


async def send_report(
    report: ReportSnapshot,
    endpoint: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> TransmissionResult:
    """
    Submit a report to the collector.

    Args:
        report: Report to send
        endpoint: Collector URL (defaults to TRANSMIT_ENDPOINT)
        client: Optional shared HTTP client

    Returns:
        ok=True once the request is dispatched; ok=False with reason
        "missing_endpoint" (nothing sent) or "network" (transport failure)
    """
    settings = get_settings()
    url = endpoint or settings.TRANSMIT_ENDPOINT
    if not url:
        logger.info("Report not sent: no collector endpoint configured")
        return TransmissionResult(ok=False, reason="missing_endpoint")

    payload = build_transmission_payload(report)

    try:
        if client is not None:
            await client.post(url, json=payload)
        else:
            async with httpx.AsyncClient(timeout=settings.TRANSMIT_TIMEOUT_SECONDS) as http:
                await http.post(url, json=payload)
    except httpx.HTTPError as e:
        logger.warning(f"Report submission {payload['submit_id']} failed: {e}")
        return TransmissionResult(ok=False, reason="network")

    logger.info(
        f"Report submission {payload['submit_id']} dispatched, "
        f"primary={payload['primary_force']}, whale={payload['is_whale']}"
    )
    return TransmissionResult(ok=True)
