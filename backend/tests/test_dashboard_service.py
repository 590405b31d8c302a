"""Tests for dashboard assembly and patient selection."""

import pytest

from app.services.access_resolver import ResolvedAccess
from app.services.dashboard import build_dashboard, load_dashboard, select_patient
from tests.conftest import make_profile


class TestBuildDashboard:
    """Tests for build_dashboard()."""

    def test_welcome_uses_caller_name(self, dentist):
        dashboard = build_dashboard(ResolvedAccess(caller_profile=dentist))
        assert dashboard.welcome == "Welcome, Dana Molar!"

    def test_welcome_without_name(self):
        """A dentist with no name on file still gets a welcome line."""
        dashboard = build_dashboard(
            ResolvedAccess(caller_profile=make_profile("D1", is_dentist=True))
        )
        assert dashboard.welcome == "Welcome, N/A!"

    def test_empty_message_only_when_empty(self, dentist, patients):
        """The empty-state message should only appear with no patients."""
        empty = build_dashboard(ResolvedAccess(caller_profile=dentist))
        full = build_dashboard(ResolvedAccess(caller_profile=dentist, patients=patients))

        assert empty.empty_message == "No patients assigned yet."
        assert full.empty_message is None

    def test_summaries_match_details(self, dentist, patients):
        """Every list entry should have a matching detail view."""
        dashboard = build_dashboard(ResolvedAccess(caller_profile=dentist, patients=patients))
        assert [s.id for s in dashboard.patients] == [d.id for d in dashboard.details]


class TestLoadDashboard:
    """Tests for load_dashboard()."""

    @pytest.mark.asyncio
    async def test_loads_from_store(self, store, caller):
        dashboard = await load_dashboard(caller, store)
        assert [p.full_name for p in dashboard.patients] == ["Noa Levi", "Omer Katz"]


class TestSelectPatient:
    """Tests for select_patient()."""

    @pytest.mark.asyncio
    async def test_selects_loaded_patient_without_io(self, store, caller):
        """Selection should not query the store again."""
        dashboard = await load_dashboard(caller, store)
        calls_before = list(store.calls)

        view = select_patient(dashboard, "P1")

        assert view is not None
        assert view.full_name == "Noa Levi"
        assert store.calls == calls_before

    def test_unknown_patient(self, dentist, patients):
        dashboard = build_dashboard(ResolvedAccess(caller_profile=dentist, patients=patients))
        assert select_patient(dashboard, "P9") is None
