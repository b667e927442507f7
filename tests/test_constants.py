"""Consistency checks between enums, lookup tables and CHECK constraints."""

import pytest

from app.core import constants
from app.core.constants import (
    ENQUIRY_CALL_STATUS_MAP,
    EXPORT_HEADERS,
    TAB_STATUSES,
)
from app.models.follow_up import FollowUp
from app.schemas.common import CallStatus, CallType, EnquiryCallStatus, TaskTab


class TestEnquiryStatusTable:
    def test_every_native_status_is_mapped(self):
        assert set(ENQUIRY_CALL_STATUS_MAP) == {s.value for s in EnquiryCallStatus}

    def test_every_mapped_value_is_canonical(self):
        assert all(isinstance(v, CallStatus) for v in ENQUIRY_CALL_STATUS_MAP.values())


class TestTabs:
    def test_tabs_partition_the_canonical_statuses(self):
        upcoming = TAB_STATUSES[TaskTab.upcoming]
        attempted = TAB_STATUSES[TaskTab.attempted]
        assert upcoming.isdisjoint(attempted)
        assert upcoming | attempted == set(CallStatus)

    def test_default_tab_is_upcoming(self):
        assert constants.DEFAULT_TAB is TaskTab.upcoming


class TestExportHeaders:
    def test_header_order(self):
        assert EXPORT_HEADERS == (
            "S.No",
            "Date",
            "Time",
            "Call Type",
            "Member Name",
            "Member Mobile",
            "Call Status",
            "Staff Name",
        )


def _constraint_text(name: str) -> str:
    for constraint in FollowUp.__table__.constraints:
        if constraint.name == name:
            return str(constraint.sqltext)
    raise AssertionError(f"constraint {name} missing")


class TestCheckConstraintsMatchEnums:
    """The database CHECK constraints must accept exactly the enum values."""

    @pytest.mark.parametrize("status", [s.value for s in CallStatus])
    def test_call_status_allowed(self, status):
        assert f"'{status}'" in _constraint_text("ck_follow_up_call_status")

    @pytest.mark.parametrize("call_type", [t.value for t in CallType])
    def test_call_type_allowed(self, call_type):
        assert f"'{call_type}'" in _constraint_text("ck_follow_up_call_type")

    def test_clause_is_deterministic(self):
        assert constants.CALL_STATUS_CHECK_CLAUSE == (
            "call_status IN ('attempted', 'contacted', 'missed', "
            "'not-contacted', 'scheduled')"
        )
