"""
Tests for the demo dataset loaded at startup.
"""

import pytest

from civic_pulse_api.app.services import seed
from civic_pulse_api.app.services.seed import SeedError, seed_storage
from civic_pulse_api.app.services.storage import MemStorage


class TestSeedData:

    def test_record_counts(self, storage):
        assert len(storage.get_all_officials()) == 3
        assert len(storage.get_all_government_activities()) == 5
        assert len(storage.get_all_citizen_issues()) == 5
        assert len(storage.get_all_vote_records()) == 2
        assert len(storage.get_all_statistics()) == 6
        assert len(storage.get_all_action_plans()) == 3

    def test_matched_issues_point_at_existing_activities(self, storage):
        matched = [i for i in storage.get_all_citizen_issues() if i.status == "matched"]

        assert [i.votes for i in matched] == [127, 89]
        for issue in matched:
            assert storage.get_government_activity(issue.matched_activity_id) is not None

    def test_pending_issues_keep_their_votes(self, storage):
        pending = [i for i in storage.get_all_citizen_issues() if i.status == "pending"]
        assert [i.votes for i in pending] == [56, 72, 43]
        assert all(i.matched_activity_id is None for i in pending)

    def test_relationships_resolve(self, storage):
        for record in storage.get_all_vote_records():
            assert storage.get_official(record.official_id) is not None
            assert storage.get_government_activity(record.activity_id) is not None
        for plan in storage.get_all_action_plans():
            assert storage.get_citizen_issue(plan.issue_id) is not None
            assert storage.get_official(plan.official_id) is not None
            if plan.activity_id is not None:
                assert storage.get_government_activity(plan.activity_id) is not None

    def test_areas_are_unique_per_type(self, storage):
        keys = [(s.area_type, s.area) for s in storage.get_all_statistics()]
        assert len(keys) == len(set(keys))

    def test_activity_agenda_items(self, storage):
        meeting = storage.get_all_government_activities()[1]
        assert meeting.type == "meeting"
        assert meeting.agenda_items[0] == "Farmers market expansion proposal"
        assert meeting.vote_result is None

    def test_failure_raises_seed_error(self, monkeypatch):
        def broken(storage):
            raise ValueError("boom")

        monkeypatch.setattr(seed, "_load", broken)

        with pytest.raises(SeedError):
            seed_storage(MemStorage())
