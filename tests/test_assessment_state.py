"""Tests for assessment state edits and the live session."""

from signal_os.core import assessment
from signal_os.core.assessment import AssessmentSession
from signal_os.core.forces import AssessmentState, ForceId, get_checklist
from signal_os.db import assessment_store


class TestDefaults:
    def test_fresh_state(self):
        state = AssessmentState()
        assert state.version == 1
        assert state.revenue_potential == 1
        assert state.scores == {force: 50 for force in ForceId}
        assert all(state.evidence[force].links == [""] for force in ForceId)
        for force in ForceId:
            assert set(state.dod[force].checks) == {item.key for item in get_checklist(force)}
            assert not any(state.dod[force].checks.values())

    def test_parsing_aligns_checklists_and_drops_unknown_forces(self):
        state = AssessmentState.model_validate(
            {
                "scores": {"essence": 140, "bogus": 3},
                "dod": {
                    "offer": {"checks": {"pricing_page": True, "stray": True}, "notes": "n"},
                    "bogus": {"checks": {}},
                },
                "evidence": {"system": {"notes": "x", "links": []}},
            }
        )
        assert state.scores[ForceId.ESSENCE] == 100
        assert set(state.scores) == set(ForceId)
        assert state.dod[ForceId.OFFER].checks == {
            "flagship_chosen": False,
            "pricing_page": True,
            "teardown_published": False,
        }
        assert state.dod[ForceId.OFFER].notes == "n"
        assert state.evidence[ForceId.SYSTEM].links == [""]


class TestFieldEdits:
    def test_score_is_clamped_and_rounded(self):
        state = AssessmentState()
        assert assessment.set_score(state, ForceId.OFFER, 150)
        assert state.scores[ForceId.OFFER] == 100
        assessment.set_score(state, "offer", -5)
        assert state.scores[ForceId.OFFER] == 0
        assessment.set_score(state, "offer", 42.5)
        assert state.scores[ForceId.OFFER] == 43

    def test_revenue_potential_is_clamped(self):
        state = AssessmentState()
        assessment.set_revenue_potential(state, 9)
        assert state.revenue_potential == 5
        assessment.set_revenue_potential(state, 0)
        assert state.revenue_potential == 1

    def test_huge_values_saturate(self):
        state = AssessmentState()
        assert assessment.set_score(state, ForceId.OFFER, 10**400)
        assert state.scores[ForceId.OFFER] == 100
        assert assessment.set_revenue_potential(state, -(10**400))
        assert state.revenue_potential == 1

    def test_infinite_score_is_rejected(self):
        state = AssessmentState()
        assert assessment.set_score(state, ForceId.OFFER, float("inf")) is False
        assert state.scores[ForceId.OFFER] == 50

    def test_non_numeric_score_is_rejected(self):
        state = AssessmentState()
        assert assessment.set_score(state, ForceId.OFFER, "lots") is False
        assert state.scores[ForceId.OFFER] == 50
        assert state.last_updated_iso == ""

    def test_unknown_force_is_rejected(self):
        state = AssessmentState()
        assert assessment.set_score(state, "marketing", 10) is False
        assert assessment.toggle_check(state, "marketing", "x") is False
        assert set(state.scores) == set(ForceId)

    def test_subject_fields(self):
        state = AssessmentState()
        assert assessment.set_subject_field(state, "name", "Acme Studio")
        assert assessment.set_subject_field(state, "phone", "555") is False
        assert state.subject.name == "Acme Studio"

    def test_applied_edit_refreshes_timestamp(self):
        state = AssessmentState()
        assessment.set_evidence_notes(state, ForceId.IDENTITY, "see deck")
        assert state.last_updated_iso != ""
        assert state.evidence[ForceId.IDENTITY].notes == "see deck"


class TestEvidence:
    def test_add_update_remove(self):
        state = AssessmentState()
        assessment.add_evidence_link(state, ForceId.ESSENCE, "https://a.example")
        assert state.evidence[ForceId.ESSENCE].links == ["", "https://a.example"]

        assert assessment.update_evidence_link(state, ForceId.ESSENCE, 0, "https://b.example")
        assert assessment.remove_evidence_link(state, ForceId.ESSENCE, 1)
        assert state.evidence[ForceId.ESSENCE].links == ["https://b.example"]

    def test_last_slot_cannot_be_removed(self):
        state = AssessmentState()
        assert assessment.remove_evidence_link(state, ForceId.GROWTH, 0) is False
        assert state.evidence[ForceId.GROWTH].links == [""]

    def test_out_of_range_index_is_rejected(self):
        state = AssessmentState()
        assessment.add_evidence_link(state, ForceId.GROWTH)
        assert assessment.update_evidence_link(state, ForceId.GROWTH, 5, "x") is False
        assert assessment.remove_evidence_link(state, ForceId.GROWTH, -1) is False
        assert len(state.evidence[ForceId.GROWTH].links) == 2


class TestChecklist:
    def test_toggle_flips_flag(self):
        state = AssessmentState()
        assert assessment.toggle_check(state, ForceId.OFFER, "pricing_page")
        assert state.dod[ForceId.OFFER].checks["pricing_page"] is True
        assessment.toggle_check(state, ForceId.OFFER, "pricing_page")
        assert state.dod[ForceId.OFFER].checks["pricing_page"] is False

    def test_unknown_key_never_added(self):
        state = AssessmentState()
        assert assessment.toggle_check(state, ForceId.OFFER, "made_up") is False
        assert "made_up" not in state.dod[ForceId.OFFER].checks

    def test_notes(self):
        state = AssessmentState()
        assessment.set_checklist_notes(state, ForceId.SYSTEM, "CRM pending")
        assert state.dod[ForceId.SYSTEM].notes == "CRM pending"


class TestAssessmentSession:
    def test_starts_empty_without_stored_state(self, storage):
        session = AssessmentSession(storage)
        assert session.state.model_dump() == AssessmentState().model_dump()

    def test_every_applied_edit_is_written_through(self, storage):
        session = AssessmentSession(storage)
        session.set_score(ForceId.SYSTEM, 25)
        session.toggle_check(ForceId.SYSTEM, "happy_path")

        reopened = AssessmentSession(storage)
        assert reopened.state.scores[ForceId.SYSTEM] == 25
        assert reopened.state.dod[ForceId.SYSTEM].checks["happy_path"] is True

    def test_rejected_edit_is_not_saved(self, storage):
        session = AssessmentSession(storage)
        assert session.remove_evidence_link(ForceId.ESSENCE, 0) is False
        assert storage.items == {}

    def test_reset_discards_state(self, storage):
        session = AssessmentSession(storage)
        session.set_revenue_potential(5)
        fresh = session.reset()
        assert fresh.model_dump() == AssessmentState().model_dump()
        assert assessment_store.load(storage) is None

    def test_report_reflects_live_state(self, storage):
        session = AssessmentSession(storage)
        session.set_score(ForceId.GROWTH, 5)
        session.set_revenue_potential(4)
        report = session.report()
        assert report.primary_force == ForceId.GROWTH
        assert report.is_whale is True
