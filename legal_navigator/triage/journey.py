"""
Journey Tracking — Five-stage progress indicator for a matter.

Understand → Options → Prepare → Act → Resolve. Progress is derived fresh
on every call from whatever context the caller passes; nothing is stored.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from legal_navigator.matter.schema import ForumMap, MatterClassification


class StageStatus(str, enum.Enum):
    DONE = "done"
    ACTIVE = "active"
    PENDING = "pending"


@dataclass
class JourneyStep:
    id: str
    label: str
    status: StageStatus
    next_steps: list[str] = field(default_factory=list)


@dataclass
class JourneyContext:
    classification: MatterClassification | None = None
    forum_map: ForumMap | None = None
    evidence_count: int = 0
    documents_generated: bool = False


@dataclass
class JourneyProgress:
    current_stage: str
    percent_complete: int
    steps: list[JourneyStep]


STAGES: list[tuple[str, list[str]]] = [
    (
        "Understand",
        [
            "Confirm the facts you provided are accurate",
            "Clarify missing details if the system prompts you",
        ],
    ),
    (
        "Options",
        [
            "Review recommended forums and pathways",
            "Note deadlines or notice requirements",
        ],
    ),
    (
        "Prepare",
        [
            "Upload evidence and organize key dates",
            "Fill missing evidence gaps and collect contact details for witnesses",
        ],
    ),
    (
        "Act",
        [
            "Generate drafts, review for accuracy, and prepare to file or send",
            "Follow filing or submission instructions for the forum",
        ],
    ),
    (
        "Resolve",
        [
            "Track responses, deadlines, and next hearings",
            "Record outcomes and consider appeals or compliance steps if needed",
        ],
    ),
]


class JourneyTracker:
    """Derives journey progress from three predicates over the context."""

    def build_progress(self, ctx: JourneyContext) -> JourneyProgress:
        steps = [
            JourneyStep(id=stage, label=stage, status=StageStatus.PENDING, next_steps=list(text))
            for stage, text in STAGES
        ]
        # Understand is complete once the user has told us anything.
        steps[0].status = StageStatus.DONE
        steps[1].status = StageStatus.ACTIVE

        has_classification = ctx.classification is not None and ctx.classification.domain is not None
        if has_classification and ctx.forum_map is not None:
            self._mark_done(steps, "Options")
        if ctx.evidence_count > 0:
            self._mark_done(steps, "Prepare")
        if ctx.documents_generated:
            self._mark_done(steps, "Act")

        unresolved = [s for s in steps if s.status != StageStatus.DONE]
        if len(unresolved) == 1 and unresolved[0].id == "Resolve":
            unresolved[0].status = StageStatus.ACTIVE
        elif not any(s.status == StageStatus.ACTIVE for s in steps):
            first_pending = next((s for s in steps if s.status == StageStatus.PENDING), None)
            if first_pending is not None:
                first_pending.status = StageStatus.ACTIVE

        done = sum(1 for s in steps if s.status == StageStatus.DONE)
        current = (
            next((s for s in steps if s.status == StageStatus.ACTIVE), None)
            or next((s for s in steps if s.status == StageStatus.PENDING), None)
            or steps[0]
        )
        return JourneyProgress(
            current_stage=current.id,
            percent_complete=round(done / len(steps) * 100),
            steps=steps,
        )

    @staticmethod
    def _mark_done(steps: list[JourneyStep], stage_id: str) -> None:
        step = next((s for s in steps if s.id == stage_id), None)
        if step is None:
            return
        step.status = StageStatus.DONE
        if any(s.status == StageStatus.ACTIVE for s in steps):
            return
        next_pending = next((s for s in steps if s.status == StageStatus.PENDING), None)
        if next_pending is not None:
            next_pending.status = StageStatus.ACTIVE
