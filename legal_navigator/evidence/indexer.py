"""
Evidence Indexing — Hash, describe and score user-supplied evidence.

Every item is fingerprinted with SHA-256 over its raw bytes so that any
later alteration is detectable. The hash is an integrity check for one
matter's evidence, not a cross-matter deduplication key.

Credibility is a heuristic in [0, 1]: a 0.5 baseline, a boost by
provenance, and small boosts for each piece of metadata recovered from
the file itself (date, sender/recipient, subject).
"""

from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from email.utils import parsedate_to_datetime

from legal_navigator.matter.schema import (
    EvidenceIndex,
    EvidenceItem,
    EvidenceType,
    Provenance,
    SourceEntry,
    SourceManifest,
    utcnow,
)

logger = logging.getLogger(__name__)

PROVENANCE_BOOST: dict[Provenance, float] = {
    Provenance.OFFICIAL_API: 0.3,
    Provenance.OFFICIAL_SITE: 0.25,
    Provenance.USER_PROVIDED: 0.1,
}

_HEADER_RE = {
    name: re.compile(rf"^{name}:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
    for name in ("Date", "From", "To", "Subject")
}
_ISO_DATE_RE = re.compile(r"\b(\d{4}-\d{2}-\d{2})(?:[ T](\d{2}:\d{2}:\d{2})Z?)?")


@dataclass
class EvidenceMetadata:
    date: str | None = None
    sender: str | None = None
    recipient: str | None = None
    subject: str | None = None
    summary: str | None = None


def _normalize_date(raw: str) -> str | None:
    """RFC 2822 header date, falling back to ISO 8601; None if neither parses."""
    raw = raw.strip()
    try:
        return parsedate_to_datetime(raw).isoformat()
    except (TypeError, ValueError):
        return _iso_date(raw)


def _iso_date(raw: str) -> str | None:
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).isoformat()
    except ValueError:
        return None


def extract_metadata(evidence_type: EvidenceType, content: bytes) -> EvidenceMetadata:
    """
    Pull what metadata we can out of the file.

    EML: Date / From / To / Subject headers. TXT: the first ISO-like date
    and the first 200 characters as a summary. Binary formats yield
    nothing.
    """
    meta = EvidenceMetadata()
    if evidence_type == EvidenceType.EML:
        text = content.decode("utf-8", errors="replace")
        date_match = _HEADER_RE["Date"].search(text)
        from_match = _HEADER_RE["From"].search(text)
        to_match = _HEADER_RE["To"].search(text)
        subject_match = _HEADER_RE["Subject"].search(text)
        if date_match:
            meta.date = _normalize_date(date_match.group(1))
        if from_match:
            meta.sender = from_match.group(1).strip()
        if to_match:
            meta.recipient = to_match.group(1).strip()
        if subject_match:
            meta.subject = subject_match.group(1).strip()
    elif evidence_type == EvidenceType.TXT:
        text = content.decode("utf-8", errors="replace")
        iso_match = _ISO_DATE_RE.search(text)
        if iso_match:
            candidate = iso_match.group(1) + (f"T{iso_match.group(2)}" if iso_match.group(2) else "")
            # digit patterns like 2024-13-45 are references, not dates
            if _iso_date(candidate):
                meta.date = candidate
        meta.summary = text[:200]
    return meta


def hash_content(content: bytes) -> str:
    """SHA-256 hex digest of raw content bytes."""
    return hashlib.sha256(content).hexdigest()


def compute_credibility(provenance: Provenance, metadata: EvidenceMetadata) -> float:
    score = 0.5 + PROVENANCE_BOOST.get(provenance, 0.0)
    if metadata.date:
        score += 0.1
    if metadata.sender or metadata.recipient:
        score += 0.1
    if metadata.subject:
        score += 0.05
    return min(1.0, max(0.0, score))


class EvidenceIndexer:
    """Accumulates evidence items for one matter."""

    def __init__(self) -> None:
        self.items: list[EvidenceItem] = []
        self.sources: list[SourceEntry] = []

    def add_item(
        self,
        filename: str,
        content: bytes,
        evidence_type: EvidenceType,
        provenance: Provenance,
        tags: list[str] | None = None,
    ) -> EvidenceItem:
        metadata = extract_metadata(evidence_type, content)
        item = EvidenceItem(
            filename=filename,
            type=evidence_type,
            date=metadata.date,
            summary=metadata.summary or f"{evidence_type.value} file: {filename}",
            provenance=provenance,
            hash=hash_content(content),
            tags=tuple(tags or ()),
            credibility_score=compute_credibility(provenance, metadata),
        )
        self.items.append(item)
        logger.debug(
            "Indexed evidence %s (%s, credibility %.2f)", filename, item.hash[:12], item.credibility_score
        )
        return item

    def set_sources(self, sources: list[SourceEntry]) -> None:
        self.sources = list(sources)

    def generate_index(self) -> EvidenceIndex:
        now = utcnow().isoformat()
        return EvidenceIndex(
            items=list(self.items),
            generated_at=now,
            source_manifest=SourceManifest(entries=list(self.sources), compiled_at=now),
        )
