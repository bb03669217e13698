"""
Document Packaging — Lay out drafts, manifests and summaries as files.

A package is an in-memory list of (path, content) pairs; writing it to
disk is up to the caller. Every path in ``PACKAGE_LAYOUT["files"]`` is
guaranteed to exist: missing ones get a placeholder and a warning.
"""

from __future__ import annotations

import logging
import re

from legal_navigator.matter.schema import (
    DocumentDraft,
    DocumentPackage,
    EvidenceManifest,
    PackagedFile,
    SourceManifest,
)

logger = logging.getLogger(__name__)

PACKAGE_LAYOUT = {
    "folders": ["evidence/", "manifests/", "drafts/", "logs/"],
    "files": [
        "manifests/source_manifest.json",
        "manifests/evidence_index.json",
        "drafts/cover_note.md",
        "drafts/checklist.md",
        "logs/audit.log",
    ],
}

PLACEHOLDER = "# Placeholder\n"


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def render_draft(draft: DocumentDraft) -> str:
    parts = [f"# {draft.title}"]
    for section in draft.sections:
        block = f"## {section.heading}\n{section.content}"
        if not section.confirmed:
            block += "\n**Confirmation required before sending.**"
        refs = [
            f"- Attachment {r.attachment_index or r.evidence_id}"
            + (f" ({r.timestamp})" if r.timestamp else "")
            for r in section.evidence_refs
        ]
        if refs:
            block += "\nEvidence References:\n" + "\n".join(refs)
        parts.append(block)

    if draft.citations:
        parts.append(
            "Citations:\n"
            + "\n".join(
                f"- {c.label}: {c.url} (retrieved {c.retrieval_date or 'unknown'})"
                for c in draft.citations
            )
        )
    if draft.disclaimer:
        parts.append(f"> {draft.disclaimer}")
    if draft.warnings:
        parts.append("Warnings:\n" + "\n".join(f"- {w}" for w in draft.warnings))
    return "\n\n".join(parts) + "\n"


class DocumentPackager:
    def assemble(
        self,
        package_name: str,
        forum_map: str,
        timeline: str,
        missing_evidence: str,
        drafts: list[DocumentDraft],
        source_manifest: SourceManifest,
        evidence_manifest: EvidenceManifest,
    ) -> DocumentPackage:
        files = [
            PackagedFile(
                path="manifests/source_manifest.json",
                content=source_manifest.model_dump_json(indent=2),
            ),
            PackagedFile(
                path="manifests/evidence_manifest.json",
                content=evidence_manifest.model_dump_json(indent=2),
            ),
            PackagedFile(path="forum_map.md", content=forum_map),
            PackagedFile(path="timeline.md", content=timeline),
            PackagedFile(path="missing_evidence.md", content=missing_evidence),
        ]
        warnings: list[str] = []

        if not drafts:
            warnings.append("No draft documents provided.")
        for i, draft in enumerate(drafts, start=1):
            name = slugify(draft.title) or f"draft-{i}"
            files.append(PackagedFile(path=f"drafts/{name}.md", content=render_draft(draft)))

        present = {f.path for f in files}
        for path in PACKAGE_LAYOUT["files"]:
            if path not in present:
                files.append(PackagedFile(path=path, content=PLACEHOLDER))
                warnings.append(f"Added placeholder for missing template file: {path}")

        logger.info("Assembled package %s: %d file(s)", package_name, len(files))
        return DocumentPackage(
            name=package_name,
            folders=list(PACKAGE_LAYOUT["folders"]),
            files=files,
            source_manifest=source_manifest,
            evidence_manifest=evidence_manifest,
            warnings=warnings,
        )
