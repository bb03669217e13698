"""
Timeline Generation — Chronology, gaps and missing-evidence alerts.

Only evidence with a parseable date appears on the timeline. Gaps longer than the
configured window (a week by default) between consecutive entries are
flagged: over 30 days is high risk, over 14 medium, otherwise low.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from legal_navigator.config import settings
from legal_navigator.matter.schema import EvidenceIndex, EvidenceType

logger = logging.getLogger(__name__)


@dataclass
class TimelineEntry:
    date: str
    item_id: str
    filename: str
    type: EvidenceType
    summary: str | None = None


@dataclass
class TimelineGap:
    start: str
    end: str
    duration_days: int
    risk_level: str  # low | medium | high


@dataclass
class MissingEvidenceAlert:
    type: str  # screenshot | email-original | audio-video | unknown
    message: str


def parse_date(value: str) -> datetime:
    """ISO date or datetime; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class TimelineGenerator:
    """Builds a chronology from an evidence index."""

    def __init__(self, gap_days: int | None = None) -> None:
        self.gap_days = settings.timeline_gap_days if gap_days is None else gap_days

    def generate(self, index: EvidenceIndex) -> list[TimelineEntry]:
        entries: list[TimelineEntry] = []
        for item in index.items:
            if not item.date:
                continue
            try:
                parse_date(item.date)
            except ValueError:
                logger.warning(
                    "Leaving %s off the timeline: unparseable date %r", item.filename, item.date
                )
                continue
            entries.append(
                TimelineEntry(
                    date=item.date,
                    item_id=item.id,
                    filename=item.filename,
                    type=item.type,
                    summary=item.summary,
                )
            )
        entries.sort(key=lambda e: parse_date(e.date))
        return entries

    def detect_gaps(self, timeline: list[TimelineEntry]) -> list[TimelineGap]:
        gaps: list[TimelineGap] = []
        for current, following in zip(timeline, timeline[1:]):
            days = (parse_date(following.date) - parse_date(current.date)).days
            if days > self.gap_days:
                risk = "high" if days > 30 else "medium" if days > 14 else "low"
                gaps.append(TimelineGap(current.date, following.date, days, risk))
        if gaps:
            logger.debug("Detected %d timeline gap(s)", len(gaps))
        return gaps

    def flag_missing_evidence(
        self, index: EvidenceIndex, timeline: list[TimelineEntry]
    ) -> list[MissingEvidenceAlert]:
        types = {item.type for item in index.items}
        has_screenshot = bool(types & {EvidenceType.PNG, EvidenceType.JPG})
        has_email = EvidenceType.EML in types
        has_correspondence = bool(types & {EvidenceType.TXT, EvidenceType.EML})

        alerts: list[MissingEvidenceAlert] = []
        if not has_screenshot and timeline:
            alerts.append(
                MissingEvidenceAlert(
                    "screenshot",
                    "No screenshot evidence found; consider adding visual documentation.",
                )
            )
        if not has_email and timeline:
            alerts.append(
                MissingEvidenceAlert(
                    "email-original",
                    "No original emails (EML) found; consider exporting full emails "
                    "from your mail client with headers.",
                )
            )
        if not has_correspondence and len(timeline) > 2:
            alerts.append(
                MissingEvidenceAlert(
                    "unknown",
                    "Limited correspondence in evidence; consider adding written communications.",
                )
            )
        return alerts

    def render_markdown(
        self,
        timeline: list[TimelineEntry],
        gaps: list[TimelineGap] | None = None,
    ) -> str:
        lines = ["# Timeline", ""]
        if not timeline:
            lines.append("No dated evidence yet.")
        for entry in timeline:
            lines.append(f"- {entry.date[:10]}: {entry.filename} ({entry.type.value})")
        if gaps:
            lines += ["", "## Gaps"]
            lines += [
                f"- {g.start[:10]} to {g.end[:10]}: {g.duration_days} days ({g.risk_level} risk)"
                for g in gaps
            ]
        return "\n".join(lines) + "\n"

    @staticmethod
    def render_missing_evidence(alerts: list[MissingEvidenceAlert]) -> str:
        lines = ["# Missing Evidence Checklist", ""]
        if not alerts:
            lines.append("No gaps detected in the evidence provided.")
        lines += [f"- [ ] {a.message}" for a in alerts]
        return "\n".join(lines) + "\n"
