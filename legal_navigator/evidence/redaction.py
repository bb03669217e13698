"""
PII Redaction — Mask personal identifiers before evidence text is shared.

Patterns run in a fixed order (email, phone, SIN, date of birth, account
number) and each match is replaced with ``[REDACTED]`` before the next
pattern runs, so a span is only ever reported once. The patterns cover
common Canadian formats only.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"

# (type, pattern); order matters, earlier patterns consume their matches.
PII_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("email", re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)),
    # digit guards leave longer runs for the account pattern
    ("phone", re.compile(r"(?<!\d)(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")),
    ("sin", re.compile(r"\b\d{3}-\d{3}-\d{3}\b|\b\d{9}\b")),
    ("dob", re.compile(r"\b\d{4}-\d{2}-\d{2}\b|\b\d{2}/\d{2}/\d{4}\b")),
    ("account", re.compile(r"\b\d{8,}\b")),
]


@dataclass
class PiiFinding:
    type: str  # email | phone | sin | dob | account
    match: str


@dataclass
class RedactionResult:
    redacted: str
    findings: list[PiiFinding] = field(default_factory=list)

    def types(self) -> set[str]:
        return {f.type for f in self.findings}


def redact_pii(text: str) -> RedactionResult:
    """Replace every recognised identifier in ``text`` with ``[REDACTED]``."""
    findings: list[PiiFinding] = []
    redacted = text
    for pii_type, pattern in PII_PATTERNS:

        def _collect(match: re.Match[str], pii_type: str = pii_type) -> str:
            findings.append(PiiFinding(pii_type, match.group(0)))
            return REDACTED

        redacted = pattern.sub(_collect, redacted)

    if findings:
        logger.debug("Redacted %d PII span(s)", len(findings))
    return RedactionResult(redacted=redacted, findings=findings)
