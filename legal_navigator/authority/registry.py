"""
Authority Registry — In-memory store of courts, tribunals and regulators.

The registry is seeded once at start-up (see ``authority.seed``) and is
read-mostly afterwards. ``update`` overwrites a record without any
concurrency control; authority data is reference data refreshed on a
cadence, not user state.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from legal_navigator.matter.schema import Authority

logger = logging.getLogger(__name__)


class AuthorityNotFoundError(LookupError):
    """Raised when an authority id is not present in the registry."""

    def __init__(self, authority_id: str) -> None:
        super().__init__(f"Authority {authority_id} not found")
        self.authority_id = authority_id


class AuthorityRegistry:
    """Keyed collection of Authority records."""

    def __init__(self, authorities: list[Authority] | None = None) -> None:
        self._authorities: dict[str, Authority] = {}
        for authority in authorities or []:
            self.add(authority)

    def add(self, authority: Authority) -> None:
        """Add (or silently replace) an authority."""
        self._authorities[authority.id] = authority

    def update(self, authority: Authority) -> None:
        """
        Replace an existing authority record.

        Raises:
            AuthorityNotFoundError: if no authority with this id was added.
        """
        if authority.id not in self._authorities:
            raise AuthorityNotFoundError(authority.id)
        self._authorities[authority.id] = authority
        logger.info("Authority updated: %s (version %s)", authority.id, authority.version)

    def get_by_id(self, authority_id: str) -> Authority | None:
        return self._authorities.get(authority_id)

    def list(self) -> list[Authority]:
        return list(self._authorities.values())

    def needs_update(self, authority_id: str, now: datetime | None = None) -> bool:
        """
        True when the authority's refresh is due.

        Due means ``now >= updated_at + update_cadence_days``. Unknown ids
        are never due.
        """
        authority = self._authorities.get(authority_id)
        if authority is None:
            return False
        now = now or datetime.now(timezone.utc)
        next_due = authority.updated_at + timedelta(days=authority.update_cadence_days)
        return now >= next_due

    def get_escalation_route(self, authority_id: str) -> list[Authority]:
        """Resolve escalation ids to records, dropping ids that do not resolve."""
        authority = self._authorities.get(authority_id)
        if authority is None:
            return []
        return [
            self._authorities[eid]
            for eid in authority.escalation_routes
            if eid in self._authorities
        ]

    def __len__(self) -> int:
        return len(self._authorities)

    def __contains__(self, authority_id: object) -> bool:
        return authority_id in self._authorities
