"""
CanLII Client — Case-law lookups through the official CanLII API only.

The CanLII REST API can browse databases and fetch a known decision, but
it has no free-text search. ``search_cases`` therefore always fails with
``CanLiiSearchUnsupportedError`` once the access policy and query have
been checked; users are pointed at the CanLII website instead.

``fetch_case_metadata`` does not call the network. It returns a fixed
record so the rest of the pipeline (citations, manifests) can be driven
end to end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from legal_navigator.access.controller import SourceAccessController
from legal_navigator.config import settings
from legal_navigator.matter.schema import AccessMethod, SourceAccessPolicy, SourceService

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
CANLII_SEARCH_URL = "https://www.canlii.org/en/"


class CanLiiAccessError(PermissionError):
    """CanLII access was refused by policy or the request was malformed."""


class CanLiiSearchUnsupportedError(RuntimeError):
    """Free-text search is not offered by the CanLII REST API."""

    code = "CanLII_API_NO_SEARCH"

    def __init__(self) -> None:
        super().__init__(
            f"{self.code}: The CanLII REST API does not support free-text search. "
            f"Please use {CANLII_SEARCH_URL} to search manually."
        )


@dataclass
class CaseMetadata:
    case_id: str
    title: str
    court: str
    decision_date: str  # ISO date
    url: str
    citation: str | None = None


@dataclass
class CaseSearchResult:
    case_id: str
    case_name: str
    year: int
    court: str
    canlii_id: str
    url: str
    summary: str | None = None
    relevance: float | None = None


@dataclass
class CaseLookupResult:
    ok: bool
    metadata: CaseMetadata | None = None
    error: str | None = None


class CanLiiClient:
    """CanLII access gated by a SourceAccessController."""

    def __init__(
        self,
        access: SourceAccessController,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> None:
        self.access = access
        self.api_key = settings.canlii_api_key if api_key is None else api_key
        self.base_url = base_url or settings.canlii_base_url

    def set_policy(self, policy: SourceAccessPolicy) -> None:
        self.access.set_policy(policy)

    def search_cases(self, query: str) -> list[CaseSearchResult]:
        """
        Free-text case search.

        Raises:
            CanLiiAccessError: if official-API access to CanLII is not
                allowed, or the query is shorter than three characters.
            CanLiiSearchUnsupportedError: always, once the checks pass.
        """
        check = self.access.validate_access(SourceService.CANLII, AccessMethod.OFFICIAL_API)
        if not check.ok:
            raise CanLiiAccessError("Access method not allowed for CanLII.")
        if not query or len(query.strip()) < MIN_QUERY_LENGTH:
            raise CanLiiAccessError(
                f"Query too short (minimum {MIN_QUERY_LENGTH} characters)"
            )
        logger.info("CanLII free-text search requested; not supported by the API")
        raise CanLiiSearchUnsupportedError()

    def fetch_case_metadata(self, query: str) -> CaseLookupResult:
        check = self.access.validate_access(SourceService.CANLII, AccessMethod.OFFICIAL_API)
        if not check.ok:
            return CaseLookupResult(ok=False, error="Access method not allowed for CanLII.")
        if not query or len(query.strip()) < MIN_QUERY_LENGTH:
            return CaseLookupResult(ok=False, error="Query too short.")

        return CaseLookupResult(
            ok=True,
            metadata=CaseMetadata(
                case_id="ONCA-2025-001",
                title="Example v. Sample",
                court="ONCA",
                decision_date="2025-01-15",
                citation="2025 ONCA 1",
                url="https://www.canlii.org/en/on/onca/doc/2025/2025onca1/2025onca1.html",
            ),
        )
