import pytest

from app.schemas.common import CallStatus, TaskTab
from app.services.call_status import (
    normalize_enquiry_status,
    normalize_follow_up_status,
    parse_tab,
    resolve_status_scope,
)


class TestNormalizeEnquiryStatus:
    @pytest.mark.parametrize(
        "native,expected",
        [
            ("answered", CallStatus.contacted),
            ("not-called", CallStatus.scheduled),
            ("missed", CallStatus.missed),
            ("no-answer", CallStatus.missed),
            ("busy", CallStatus.attempted),
            ("enquiry", CallStatus.not_contacted),
            ("future-prospect", CallStatus.not_contacted),
            ("not-interested", CallStatus.not_contacted),
        ],
    )
    def test_mapping_table(self, native, expected):
        assert normalize_enquiry_status(native) is expected

    @pytest.mark.parametrize("native", [None, "", "call-back-later", "ANSWERED"])
    def test_absent_or_unknown_is_scheduled(self, native):
        assert normalize_enquiry_status(native) is CallStatus.scheduled


class TestNormalizeFollowUpStatus:
    @pytest.mark.parametrize("status", list(CallStatus))
    def test_canonical_values_pass_through(self, status):
        assert normalize_follow_up_status(status.value) is status

    def test_missing_defaults_to_scheduled(self):
        assert normalize_follow_up_status(None) is CallStatus.scheduled

    def test_garbage_defaults_to_scheduled(self):
        assert normalize_follow_up_status("dialled") is CallStatus.scheduled


class TestParseTab:
    def test_known_tabs(self):
        assert parse_tab("attempted") is TaskTab.attempted
        assert parse_tab(" Upcoming ") is TaskTab.upcoming

    @pytest.mark.parametrize("tab", [None, "", "archive"])
    def test_fallback_to_upcoming(self, tab):
        assert parse_tab(tab) is TaskTab.upcoming


class TestResolveStatusScope:
    def test_explicit_status_beats_tab(self):
        scope = resolve_status_scope("missed", "attempted")
        assert scope == {CallStatus.missed}

    def test_tab_upcoming(self):
        assert resolve_status_scope(None, "upcoming") == {
            CallStatus.scheduled,
            CallStatus.missed,
            CallStatus.not_contacted,
        }

    def test_tab_attempted(self):
        assert resolve_status_scope("all", "attempted") == {
            CallStatus.attempted,
            CallStatus.contacted,
        }

    def test_unknown_status_falls_back_to_tab(self):
        assert resolve_status_scope("dialled", "attempted") == {
            CallStatus.attempted,
            CallStatus.contacted,
        }

    def test_without_tab_everything_matches(self):
        assert resolve_status_scope(None, "upcoming", apply_tab=False) is None
        assert resolve_status_scope("all", None, apply_tab=False) is None

    def test_explicit_status_without_tab(self):
        assert resolve_status_scope("contacted", None, apply_tab=False) == {
            CallStatus.contacted
        }
