"""
Legal Navigator CLI — Operator tool for triage, authorities, readability and redaction.

Usage:
    legal-navigator triage "My landlord changed the locks" --amount 3000
    legal-navigator triage "Insurer denied my claim" --evidence letter.eml --out ./package
    legal-navigator authorities --stale
    legal-navigator readability --file draft.md
    legal-navigator redact --file notes.txt

Exit status is 0 on success and 1 when a library error is reported.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

import structlog
from rich.console import Console
from rich.table import Table

from legal_navigator.authority.registry import AuthorityNotFoundError
from legal_navigator.authority.seed import build_default_registry
from legal_navigator.caselaw.canlii import CanLiiAccessError, CanLiiSearchUnsupportedError
from legal_navigator.config import settings
from legal_navigator.evidence.indexer import EvidenceIndexer
from legal_navigator.evidence.redaction import redact_pii
from legal_navigator.language.readability import ReadabilityScorer
from legal_navigator.matter.schema import EvidenceType, Provenance
from legal_navigator.triage.service import TriageService

console = Console()

LIBRARY_ERRORS = (AuthorityNotFoundError, CanLiiAccessError, CanLiiSearchUnsupportedError)

EXTENSION_TYPES = {
    ".pdf": EvidenceType.PDF,
    ".png": EvidenceType.PNG,
    ".jpg": EvidenceType.JPG,
    ".jpeg": EvidenceType.JPG,
    ".eml": EvidenceType.EML,
    ".msg": EvidenceType.MSG,
    ".txt": EvidenceType.TXT,
}


def configure_logging() -> None:
    """Configure structured logging."""
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.dev.ConsoleRenderer()
                if settings.log_format != "json"
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def evidence_type_for(path: Path) -> EvidenceType:
    try:
        return EXTENSION_TYPES[path.suffix.lower()]
    except KeyError:
        raise ValueError(f"Unsupported evidence file type: {path.name}") from None


# ════════════════════════════════════════════════════════════════
# Commands
# ════════════════════════════════════════════════════════════════


def run_triage(args: argparse.Namespace) -> int:
    log = structlog.get_logger()
    service = TriageService()
    triage = service.assess(
        args.description,
        domain_hint=args.domain,
        jurisdiction_hint=args.jurisdiction,
        dispute_amount=args.amount,
        is_appeal=args.appeal,
        is_judicial_review=args.judicial_review,
    )
    classification = triage.classification.classification
    log.info(
        "legal_navigator.triage.complete",
        matter_id=classification.id,
        domain=classification.domain.value,
        forum=triage.forum_map.primary_forum.id,
    )

    console.print("\n[bold blue]═══ Matter Triage ═══[/bold blue]")
    console.print("[dim]Legal information, not legal advice.[/dim]\n")
    ambiguous = " [yellow](ambiguous)[/yellow]" if triage.pillar.pillar_ambiguous else ""
    console.print(f"  Pillar: [bold]{triage.pillar.pillar.value}[/bold]{ambiguous}")
    console.print(f"  Domain: [bold]{classification.domain.value}[/bold]")
    console.print(f"  Jurisdiction: {classification.jurisdiction}")
    console.print(f"  Confidence: {triage.classification.confidence.overall}%")
    console.print(
        f"  Primary forum: [bold green]{triage.forum_map.primary_forum.name}[/bold green]"
    )
    for alt in triage.forum_map.alternatives:
        console.print(f"  Alternative: {alt.name}")
    for esc in triage.forum_map.escalation:
        console.print(f"  Escalation: {esc.name}")
    console.print(f"\n  {triage.forum_map.rationale}")
    console.print(f"  Burden of proof: {triage.explanation.burden_of_proof}")
    for step in triage.explanation.next_steps:
        console.print(f"    - {step}")
    for factor in triage.classification.uncertainties:
        console.print(f"  [yellow]⚠ {factor.description}[/yellow]")
    for period in triage.limitation_periods:
        console.print(f"  Limitation: {period.name} ({period.period})")
    console.print(
        f"\n  Journey: {triage.journey.current_stage} ({triage.journey.percent_complete}%)"
    )

    if args.evidence or args.out:
        indexer = EvidenceIndexer()
        for raw in args.evidence or []:
            path = Path(raw)
            indexer.add_item(
                path.name, path.read_bytes(), evidence_type_for(path), Provenance.USER_PROVIDED
            )
        output = service.generate_documents(triage, indexer)
        if output is None:
            console.print(
                f"\n[yellow]No document module for {classification.domain.value}[/yellow]"
            )
        else:
            table = Table(show_lines=False)
            table.add_column("Draft", style="cyan")
            table.add_column("Warnings", justify="right")
            for draft in output.drafts:
                table.add_row(draft.title, str(len(draft.warnings)))
            console.print(table)
            if args.out:
                root = Path(args.out)
                for packaged in output.package.files:
                    target = root / packaged.path
                    target.parent.mkdir(parents=True, exist_ok=True)
                    target.write_text(packaged.content, encoding="utf-8")
                console.print(f"  Package written to [bold]{root}[/bold]")

    console.print("\n[bold blue]═══ Triage Complete ═══[/bold blue]\n")
    return 0


def run_authorities(args: argparse.Namespace) -> int:
    registry = build_default_registry()
    table = Table(show_lines=False)
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Type", style="green")
    table.add_column("Jurisdiction")
    table.add_column("Escalates to", style="dim")
    table.add_column("Needs update")

    for authority in registry.list():
        stale = registry.needs_update(authority.id)
        if args.stale and not stale:
            continue
        table.add_row(
            authority.id,
            authority.name,
            authority.type.value,
            authority.jurisdiction,
            ", ".join(authority.escalation_routes) or "-",
            "yes" if stale else "no",
        )
    console.print(table)
    return 0


def run_readability(args: argparse.Namespace) -> int:
    text = Path(args.file).read_text(encoding="utf-8") if args.file else args.text
    if not text:
        console.print("[red]Provide text or --file[/red]")
        return 1
    scorer = ReadabilityScorer()
    result = scorer.score(text)
    console.print(
        f"  Score: [bold]{result.score}[/bold] ({result.grade}, grade {result.grade_level})"
    )
    console.print(f"  {scorer.grade_description(result.grade)}")
    for suggestion in result.suggestions:
        console.print(f"    - {suggestion}")
    return 0


def run_redact(args: argparse.Namespace) -> int:
    text = Path(args.file).read_text(encoding="utf-8") if args.file else args.text
    if not text:
        console.print("[red]Provide text or --file[/red]")
        return 1
    result = redact_pii(text)
    console.print(result.redacted, markup=False, highlight=False)
    if result.findings:
        counts = Counter(f.type for f in result.findings)
        summary = ", ".join(f"{kind} x{n}" for kind, n in sorted(counts.items()))
        console.print(f"[dim]Redacted: {summary}[/dim]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legal-navigator",
        description="Ontario legal information navigator (information, not advice)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    triage = sub.add_parser("triage", help="Classify and route a matter")
    triage.add_argument("description", help="Plain-language description of the matter")
    triage.add_argument("--domain", default=None, help="Domain hint (e.g. landlordTenant)")
    triage.add_argument("--jurisdiction", default=None, help="Jurisdiction hint")
    triage.add_argument("--amount", type=float, default=None, help="Dispute amount in dollars")
    triage.add_argument("--appeal", action="store_true", help="The matter is an appeal")
    triage.add_argument(
        "--judicial-review", action="store_true", help="The matter is a judicial review"
    )
    triage.add_argument(
        "--evidence", action="append", default=None, help="Evidence file (repeatable)"
    )
    triage.add_argument("--out", default=None, help="Write the document package here")
    triage.set_defaults(handler=run_triage)

    authorities = sub.add_parser("authorities", help="List seeded courts and tribunals")
    authorities.add_argument(
        "--stale", action="store_true", help="Only authorities due for an update"
    )
    authorities.set_defaults(handler=run_authorities)

    readability = sub.add_parser("readability", help="Score plain-language readability")
    readability.add_argument("text", nargs="?", default=None)
    readability.add_argument("--file", default=None)
    readability.set_defaults(handler=run_readability)

    redact = sub.add_parser("redact", help="Mask personal identifiers in text")
    redact.add_argument("text", nargs="?", default=None)
    redact.add_argument("--file", default=None)
    redact.set_defaults(handler=run_redact)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        code = args.handler(args)
    except (*LIBRARY_ERRORS, OSError, ValueError) as exc:
        console.print(f"[bold red]✗ {exc}[/bold red]")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
