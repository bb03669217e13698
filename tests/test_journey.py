"""Tests for Journey Tracking."""

from __future__ import annotations

from legal_navigator.authority.seed import build_default_registry
from legal_navigator.matter.schema import Domain, MatterClassification
from legal_navigator.triage.forum_router import ForumRouter, RoutingInput
from legal_navigator.triage.journey import JourneyContext, JourneyTracker, StageStatus


class TestJourneyTracker:
    def setup_method(self):
        self.tracker = JourneyTracker()
        self.classification = MatterClassification(domain=Domain.LANDLORD_TENANT)
        self.forum_map = ForumRouter(build_default_registry()).route(
            RoutingInput(domain=Domain.LANDLORD_TENANT)
        )

    def _statuses(self, progress):
        return {s.id: s.status for s in progress.steps}

    def test_empty_context(self):
        progress = self.tracker.build_progress(JourneyContext())
        assert progress.current_stage == "Options"
        assert progress.percent_complete == 20
        statuses = self._statuses(progress)
        assert statuses["Understand"] == StageStatus.DONE
        assert statuses["Options"] == StageStatus.ACTIVE
        assert statuses["Resolve"] == StageStatus.PENDING

    def test_classified_and_routed(self):
        progress = self.tracker.build_progress(
            JourneyContext(classification=self.classification, forum_map=self.forum_map)
        )
        assert progress.current_stage == "Prepare"
        assert progress.percent_complete == 40

    def test_classification_without_forum_map_stays_on_options(self):
        progress = self.tracker.build_progress(
            JourneyContext(classification=self.classification)
        )
        assert progress.current_stage == "Options"

    def test_single_active_stage_when_options_open(self):
        progress = self.tracker.build_progress(
            JourneyContext(classification=self.classification, evidence_count=2)
        )
        statuses = self._statuses(progress)
        assert statuses["Prepare"] == StageStatus.DONE
        assert [sid for sid, st in statuses.items() if st == StageStatus.ACTIVE] == ["Options"]
        assert statuses["Act"] == StageStatus.PENDING
        assert progress.current_stage == "Options"

    def test_everything_supplied(self):
        progress = self.tracker.build_progress(
            JourneyContext(
                classification=self.classification,
                forum_map=self.forum_map,
                evidence_count=3,
                documents_generated=True,
            )
        )
        assert progress.current_stage == "Resolve"
        assert progress.percent_complete == 80
        assert self._statuses(progress)["Resolve"] == StageStatus.ACTIVE

    def test_five_stages_with_next_steps(self):
        progress = self.tracker.build_progress(JourneyContext())
        assert [s.id for s in progress.steps] == [
            "Understand", "Options", "Prepare", "Act", "Resolve",
        ]
        assert all(s.next_steps for s in progress.steps)
