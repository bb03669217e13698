"""
Matter Schema — Pydantic models for every Legal Navigator entity.

These models are the canonical data structures shared by triage, forum
routing, evidence indexing, document drafting and packaging. They are
plain in-memory records; nothing here persists itself.

Sections:
    Enumerations       — closed vocabularies (pillars, domains, file types)
    Matter & routing   — classification, authorities, forum maps
    Evidence           — indexed items, manifests and source entries
    Documents          — drafts, sections, citations and packages
    Domain modules     — inputs/outputs of the per-domain generators
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field, computed_field, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


# ════════════════════════════════════════════════════════════════
# Enumerations
# ════════════════════════════════════════════════════════════════


class Pillar(str, enum.Enum):
    """Coarse legal-system category. Ambiguity is flagged separately."""

    CRIMINAL = "Criminal"
    CIVIL = "Civil"
    ADMINISTRATIVE = "Administrative"
    QUASI_CRIMINAL = "Quasi-Criminal"
    UNKNOWN = "Unknown"


class Domain(str, enum.Enum):
    """Legal areas a matter can be classified into."""

    INSURANCE = "insurance"
    LANDLORD_TENANT = "landlordTenant"
    EMPLOYMENT = "employment"
    HUMAN_RIGHTS = "humanRights"
    CIVIL_NEGLIGENCE = "civil-negligence"
    CRIMINAL = "criminal"
    OCPP_FILING = "ocppFiling"
    TREE_DAMAGE = "tree-damage"
    OTHER = "other"


ONTARIO = "Ontario"
FEDERAL = "Federal"


class PartyType(str, enum.Enum):
    INDIVIDUAL = "individual"
    BUSINESS = "business"
    GOVERNMENT = "government"


class Urgency(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MatterStatus(str, enum.Enum):
    UNCLASSIFIED = "unclassified"
    CLASSIFIED = "classified"
    NEEDS_INFO = "needsInfo"


class AuthorityType(str, enum.Enum):
    COURT = "court"
    TRIBUNAL = "tribunal"
    REGULATOR = "regulator"


class EvidenceType(str, enum.Enum):
    """Accepted evidence file formats."""

    PDF = "PDF"
    PNG = "PNG"
    JPG = "JPG"
    EML = "EML"
    MSG = "MSG"
    TXT = "TXT"


class Provenance(str, enum.Enum):
    USER_PROVIDED = "user-provided"
    OFFICIAL_API = "official-api"
    OFFICIAL_SITE = "official-site"


class AccessMethod(str, enum.Enum):
    OFFICIAL_API = "official-api"
    OFFICIAL_SITE = "official-site"
    USER_PROVIDED = "user-provided"


class SourceService(str, enum.Enum):
    CANLII = "CanLII"
    E_LAWS = "e-Laws"
    JUSTICE_LAWS = "Justice Laws"


# ════════════════════════════════════════════════════════════════
# Matter & routing
# ════════════════════════════════════════════════════════════════


class Parties(BaseModel):
    claimant_type: str = PartyType.INDIVIDUAL.value
    respondent_type: str = PartyType.BUSINESS.value
    names: list[str] = Field(default_factory=list)


class MatterTimeline(BaseModel):
    start: str | None = None
    end: str | None = None
    key_dates: list[str] = Field(default_factory=list)


class MatterClassification(BaseModel):
    """
    Identifies a legal matter.

    Created once per matter at intake and replaced (not edited) on
    re-classification.
    """

    id: str = Field(default_factory=lambda: new_id("mc"))
    domain: Domain
    jurisdiction: str = ONTARIO
    parties: Parties = Field(default_factory=Parties)
    timeline: MatterTimeline | None = None
    urgency: Urgency = Urgency.MEDIUM
    dispute_amount: float | None = None
    status: MatterStatus = MatterStatus.UNCLASSIFIED
    description: str | None = None
    notes: list[str] = Field(default_factory=list)


class PillarClassification(BaseModel):
    """Pillar assessment of free text: a single pillar plus every match."""

    pillar: Pillar
    pillars: list[Pillar] = Field(default_factory=list)

    @computed_field
    @property
    def pillar_ambiguous(self) -> bool:
        return len(self.pillars) > 1


class AuthorityRef(BaseModel):
    id: str
    name: str
    type: AuthorityType
    jurisdiction: str


class Authority(BaseModel):
    """A court, tribunal or regulator record held in the AuthorityRegistry."""

    id: str
    name: str
    type: AuthorityType
    jurisdiction: str
    version: str = "1.0.0"
    updated_at: datetime = Field(default_factory=utcnow)
    update_cadence_days: int = 30
    escalation_routes: list[str] = Field(
        default_factory=list, description="Ids of authorities a decision escalates to"
    )

    def ref(self) -> AuthorityRef:
        return AuthorityRef(
            id=self.id, name=self.name, type=self.type, jurisdiction=self.jurisdiction
        )


class ForumMap(BaseModel):
    """Read-only routing projection, recomputed on every routing request."""

    domain: Domain
    primary_forum: AuthorityRef
    alternatives: list[AuthorityRef] = Field(default_factory=list)
    escalation: list[AuthorityRef] = Field(default_factory=list)
    rationale: str = ""

    def to_markdown(self) -> str:
        lines = [
            "# Forum Map",
            "",
            f"**Domain:** {self.domain.value}",
            f"**Primary forum:** {self.primary_forum.name} ({self.primary_forum.id})",
        ]
        if self.alternatives:
            lines.append("")
            lines.append("## Alternatives")
            lines.extend(f"- {a.name} ({a.id})" for a in self.alternatives)
        if self.escalation:
            lines.append("")
            lines.append("## Escalation")
            lines.extend(f"- {a.name} ({a.id})" for a in self.escalation)
        if self.rationale:
            lines.append("")
            lines.append("## Rationale")
            lines.append(self.rationale)
        return "\n".join(lines) + "\n"


# ════════════════════════════════════════════════════════════════
# Evidence
# ════════════════════════════════════════════════════════════════


class SourceEntry(BaseModel):
    service: SourceService
    url: str
    retrieval_date: str | None = None
    version: str | None = None


class AccessLogRecord(BaseModel):
    service: str
    method: AccessMethod
    timestamp: str


class SourceManifest(BaseModel):
    entries: list[SourceEntry] = Field(default_factory=list)
    access_log: list[AccessLogRecord] = Field(default_factory=list)
    compiled_at: str | None = None
    notes: list[str] = Field(default_factory=list)


class EvidenceItem(BaseModel):
    """An indexed piece of evidence. Immutable once created."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: new_id("item"))
    filename: str
    type: EvidenceType
    date: str | None = None
    summary: str | None = None
    provenance: Provenance
    hash: str = Field(description="SHA-256 hex digest of the content bytes")
    tags: tuple[str, ...] = ()
    credibility_score: float = 0.5

    @field_validator("credibility_score")
    @classmethod
    def _clamp_credibility(cls, v: float) -> float:
        return min(1.0, max(0.0, v))


class EvidenceIndex(BaseModel):
    items: list[EvidenceItem] = Field(default_factory=list)
    generated_at: str = Field(default_factory=lambda: utcnow().isoformat())
    source_manifest: SourceManifest = Field(default_factory=SourceManifest)


class EvidenceManifestItem(BaseModel):
    id: str
    filename: str
    type: EvidenceType
    hash: str
    provenance: Provenance
    credibility_score: float | None = None
    date: str | None = None


class EvidenceManifest(BaseModel):
    items: list[EvidenceManifestItem] = Field(default_factory=list)
    compiled_at: str = Field(default_factory=lambda: utcnow().isoformat())
    notes: list[str] = Field(default_factory=list)


# ════════════════════════════════════════════════════════════════
# Documents
# ════════════════════════════════════════════════════════════════


class EvidenceReference(BaseModel):
    evidence_id: str
    attachment_index: int | None = None
    timestamp: str | None = None
    description: str | None = None


class Citation(BaseModel):
    label: str
    url: str
    retrieval_date: str | None = None
    source: SourceService
    evidence_id: str | None = None


class DraftSection(BaseModel):
    heading: str
    content: str
    evidence_refs: list[EvidenceReference] = Field(default_factory=list)
    confirmed: bool = False


class DocumentDraft(BaseModel):
    """A generated guidance document. Never edited after creation."""

    id: str = Field(default_factory=lambda: new_id("draft"))
    title: str
    sections: list[DraftSection] = Field(default_factory=list)
    disclaimer: str | None = None
    citations: list[Citation] = Field(default_factory=list)
    style_warnings: list[str] = Field(default_factory=list)
    citation_warnings: list[str] = Field(default_factory=list)
    missing_confirmations: list[str] = Field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        return [*self.missing_confirmations, *self.style_warnings, *self.citation_warnings]


class PackagedFile(BaseModel):
    path: str
    content: str


class DocumentPackage(BaseModel):
    name: str
    folders: list[str] = Field(default_factory=list)
    files: list[PackagedFile] = Field(default_factory=list)
    source_manifest: SourceManifest
    evidence_manifest: EvidenceManifest
    warnings: list[str] = Field(default_factory=list)

    def get_file(self, path: str) -> PackagedFile | None:
        return next((f for f in self.files if f.path == path), None)


class SourceAccessRules(BaseModel):
    enforce_currency_dates: bool = False
    enforce_bilingual_text: bool = False
    block_scraping: bool = False


class SourceAccessPolicy(BaseModel):
    service: SourceService
    allowed_methods: list[AccessMethod] = Field(default_factory=list)
    blocked: list[str] = Field(default_factory=list)
    rules: SourceAccessRules = Field(default_factory=SourceAccessRules)


# ════════════════════════════════════════════════════════════════
# Domain modules
# ════════════════════════════════════════════════════════════════


class DomainModuleInput(BaseModel):
    classification: MatterClassification
    forum_map: str = ""
    timeline: str = ""
    missing_evidence: str = ""
    evidence_index: EvidenceIndex = Field(default_factory=EvidenceIndex)
    source_manifest: SourceManifest = Field(default_factory=SourceManifest)
    evidence_manifest: EvidenceManifest | None = None
    package_name: str | None = None

    def primary_evidence_refs(self) -> list[EvidenceReference]:
        """Evidence references for drafts: the first indexed item only."""
        if not self.evidence_index.items:
            return []
        return [EvidenceReference(evidence_id=self.evidence_index.items[0].id)]


class DomainModuleOutput(BaseModel):
    drafts: list[DocumentDraft]
    package: DocumentPackage
    warnings: list[str] = Field(default_factory=list)


