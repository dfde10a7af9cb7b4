"""Tests for report snapshot, export, summary and audit link."""

import json
from datetime import UTC, datetime
from urllib.parse import parse_qs, urlparse

import pytest
from pydantic import ValidationError

from signal_os.core import assessment
from signal_os.core.forces import AssessmentState, Band, ForceId
from signal_os.core.report_builder import (
    build_audit_url,
    build_report,
    export_filename,
    export_report,
    report_to_json,
    summary_text,
)

GENERATED_AT = datetime(2026, 3, 2, 9, 30, tzinfo=UTC)


@pytest.fixture
def state():
    """Assessment with offer as the clear weakest force."""
    s = AssessmentState()
    assessment.set_subject_field(s, "name", "Acme  Studio")
    assessment.set_subject_field(s, "website", "https://acme.test")
    assessment.set_revenue_potential(s, 3)
    for force, score in {
        ForceId.ESSENCE: 70,
        ForceId.IDENTITY: 70,
        ForceId.OFFER: 10,
        ForceId.SYSTEM: 50,
        ForceId.GROWTH: 90,
    }.items():
        assessment.set_score(s, force, score)
    assessment.toggle_check(s, ForceId.OFFER, "flagship_chosen")
    return s


class TestBuildReport:
    def test_derived_values(self, state):
        report = build_report(state, generated_at=GENERATED_AT)

        assert report.primary_force == ForceId.OFFER
        assert report.secondary_force == ForceId.SYSTEM
        assert report.is_whale is False
        assert report.bands == {
            ForceId.ESSENCE: Band.OK,
            ForceId.IDENTITY: Band.OK,
            ForceId.OFFER: Band.CRITICAL,
            ForceId.SYSTEM: Band.FRICTION,
            ForceId.GROWTH: Band.STRONG,
        }
        assert report.completion[ForceId.OFFER] == 33
        assert [item.key for item in report.next_actions] == ["pricing_page", "teardown_published"]
        assert report.primary_leak.leak_name == "VALUE CONFUSION"
        assert report.generated_at_iso == GENERATED_AT.isoformat()
        assert report.last_updated_iso == state.last_updated_iso

    def test_snapshot_is_detached_from_state(self, state):
        report = build_report(state)
        assessment.add_evidence_link(state, ForceId.OFFER, "https://later.test")
        assessment.toggle_check(state, ForceId.OFFER, "pricing_page")
        assert report.evidence[ForceId.OFFER].links == [""]
        assert report.dod[ForceId.OFFER].checks["pricing_page"] is False

    def test_snapshot_cannot_be_reassigned(self, state):
        report = build_report(state)
        assert isinstance(report.next_actions, tuple)
        with pytest.raises(ValidationError):
            report.primary_force = ForceId.GROWTH
        report.scores[ForceId.OFFER] = 99
        assert state.scores[ForceId.OFFER] == 10

    def test_same_state_same_report(self, state):
        first = build_report(state, generated_at=GENERATED_AT)
        second = build_report(state, generated_at=GENERATED_AT)
        assert report_to_json(first) == report_to_json(second)

    def test_whale_flag(self, state):
        assessment.set_revenue_potential(state, 4)
        assert build_report(state).is_whale is True

    def test_json_uses_camel_case(self, state):
        data = json.loads(report_to_json(build_report(state, generated_at=GENERATED_AT)))
        assert data["primaryForce"] == "offer"
        assert data["secondaryForce"] == "system"
        assert data["isWhale"] is False
        assert data["revenuePotential"] == 3
        assert data["bands"]["growth"] == "STRONG"
        assert data["primaryLeak"]["leakName"] == "VALUE CONFUSION"
        assert data["generatedAtISO"] == GENERATED_AT.isoformat()


class TestExport:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Acme  Studio", "signal_os_acme_studio.json"),
            ("  Jane\tDoe \n Co ", "signal_os_jane_doe_co.json"),
            ("", "signal_os_assessment.json"),
            ("   ", "signal_os_assessment.json"),
            ("a/b", "signal_os_a_b.json"),
        ],
    )
    def test_filename(self, name, expected):
        assert export_filename(name) == expected

    def test_export_writes_report_json(self, state, tmp_path):
        report = build_report(state, generated_at=GENERATED_AT)
        path = export_report(report, tmp_path)
        assert path == tmp_path / "signal_os_acme_studio.json"
        assert json.loads(path.read_text(encoding="utf-8")) == json.loads(report_to_json(report))

    def test_export_defaults_to_configured_dir(self, state, tmp_path):
        path = export_report(build_report(state))
        assert path.parent == tmp_path / "exports"
        assert path.exists()


class TestSummaryAndAuditLink:
    def test_summary_names_primary_leak(self, state):
        text = summary_text(build_report(state))
        assert "Primary leak: VALUE CONFUSION (OFFER)" in text
        assert "Secondary: SYSTEM" in text
        assert "For: Acme  Studio" in text
        assert "OFFER 10 (CRITICAL)" in text

    def test_audit_url(self, state):
        url = build_audit_url(build_report(state), base_url="https://audit.example/")
        parsed = urlparse(url)
        query = parse_qs(parsed.query)

        assert parsed.netloc == "audit.example"
        assert query["from"] == ["signal"]
        assert query["primary"] == ["offer"]
        assert query["secondary"] == ["system"]
        assert query["scores"] == ["essence-70,identity-70,offer-10,system-50,growth-90"]
        assert query["website"] == ["https://acme.test"]
        assert "email" not in query

    def test_audit_url_defaults_to_setting(self, state):
        assert build_audit_url(build_report(state)).startswith("https://audit.qtmbg.com/?")
