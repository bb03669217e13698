"""
Forum Routing — Select the court or tribunal a matter should start in.

Decision order (first rule that applies wins):

1. Domain overrides. Criminal matters go to the Ontario Court of Justice;
   housing matters to the Landlord and Tenant Board; human rights
   applications to the HRTO. These short-circuit every other rule,
   including the appeal flags and the dispute amount.
2. Appeal / judicial review flags route to the appellate or reviewing
   court for the jurisdiction.
3. Ontario trial court by dispute amount: at or below the Small Claims
   limit → Small Claims Court, above it → Superior Court of Justice.
4. Anything else defaults to the Federal Court.

Alternatives and escalation routes are looked up from the registry and
summarised in a plain-language rationale.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from legal_navigator.authority.registry import AuthorityNotFoundError, AuthorityRegistry
from legal_navigator.config import settings
from legal_navigator.matter.schema import ONTARIO, AuthorityRef, Domain, ForumMap

logger = logging.getLogger(__name__)

DOMAIN_FORUMS: dict[Domain, str] = {
    Domain.CRIMINAL: "ON-OCJ",
    Domain.LANDLORD_TENANT: "ON-LTB",
    Domain.HUMAN_RIGHTS: "ON-HRTO",
}

# primary forum id -> alternative forum ids
ALTERNATIVE_FORUMS: dict[str, list[str]] = {
    "ON-LTB": ["ON-DivCt"],
    "ON-HRTO": ["ON-DivCt"],
    "CA-FC": ["CA-FCA"],
}


class RoutingInput(BaseModel):
    domain: Domain
    jurisdiction: str = ONTARIO
    dispute_amount: float | None = None
    is_appeal: bool = False
    is_judicial_review: bool = False


class ForumRouter:
    """Selects a primary forum from the authority registry."""

    def __init__(
        self,
        registry: AuthorityRegistry,
        small_claims_limit: float | None = None,
    ) -> None:
        self.registry = registry
        self.small_claims_limit = (
            settings.small_claims_limit if small_claims_limit is None else small_claims_limit
        )

    def route(self, data: RoutingInput) -> ForumMap:
        """
        Build a ForumMap for the matter.

        Raises:
            AuthorityNotFoundError: if a forum the decision table names is
                missing from the registry.
        """
        primary = self.primary_forum(data)
        escalation = [a.ref() for a in self.registry.get_escalation_route(primary.id)]
        alternatives = [self._must_get(aid) for aid in ALTERNATIVE_FORUMS.get(primary.id, [])]
        rationale = self._build_rationale(data, escalation, alternatives)

        logger.info(
            "Routed %s matter (%s) to %s", data.domain.value, data.jurisdiction, primary.id
        )
        return ForumMap(
            domain=data.domain,
            primary_forum=primary,
            alternatives=alternatives,
            escalation=escalation,
            rationale=rationale,
        )

    def primary_forum(self, data: RoutingInput) -> AuthorityRef:
        override = DOMAIN_FORUMS.get(data.domain)
        if override:
            return self._must_get(override)

        ontario = data.jurisdiction == ONTARIO
        if data.is_appeal:
            return self._must_get("ON-CA" if ontario else "CA-FCA")
        if data.is_judicial_review:
            return self._must_get("ON-DivCt" if ontario else "CA-FC")

        if ontario:
            if self._within_small_claims(data):
                return self._must_get("ON-SMALL")
            return self._must_get("ON-SC")

        return self._must_get("CA-FC")

    def _within_small_claims(self, data: RoutingInput) -> bool:
        return (data.dispute_amount or 0) <= self.small_claims_limit

    def _must_get(self, authority_id: str) -> AuthorityRef:
        authority = self.registry.get_by_id(authority_id)
        if authority is None:
            raise AuthorityNotFoundError(authority_id)
        return authority.ref()

    def _build_rationale(
        self,
        data: RoutingInput,
        escalation: list[AuthorityRef],
        alternatives: list[AuthorityRef],
    ) -> str:
        notes: list[str] = []

        if data.domain == Domain.CRIMINAL:
            notes.append("Criminal charges in Ontario begin in the Ontario Court of Justice.")
        elif data.domain == Domain.LANDLORD_TENANT:
            notes.append("Housing matters in Ontario route to the Landlord and Tenant Board first.")
        elif data.domain == Domain.HUMAN_RIGHTS:
            notes.append("Human rights applications start at the HRTO before any court review.")
        elif data.is_appeal:
            notes.append("Appeal flagged; routing directly to an appeal court.")
        elif data.is_judicial_review:
            notes.append("Judicial review requested; routing to the reviewing court.")
        elif data.jurisdiction == ONTARIO:
            limit = f"${self.small_claims_limit:,.0f}"
            if self._within_small_claims(data):
                notes.append(
                    f"Claim amount within the Small Claims Court monetary limit in Ontario ({limit})."
                )
            else:
                notes.append(
                    f"Claim amount exceeds the Small Claims limit ({limit}); "
                    "defaults to the Superior Court of Justice in Ontario."
                )

        if alternatives:
            notes.append("Alternative forum provided for review or secondary path.")
        if escalation:
            notes.append("Escalation route available for appeals or judicial review.")

        return " ".join(notes)
