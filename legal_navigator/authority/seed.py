"""
Seed authorities — the Ontario and federal forums the router can select.

``build_default_registry`` is called once at start-up. Records carry a
refresh cadence so ``AuthorityRegistry.needs_update`` can flag stale data.
"""

from __future__ import annotations

from datetime import datetime

from legal_navigator.authority.registry import AuthorityRegistry
from legal_navigator.matter.schema import FEDERAL, ONTARIO, Authority, AuthorityType, utcnow

# (id, name, type, jurisdiction, cadence_days, escalation_routes)
_SEED: list[tuple[str, str, AuthorityType, str, int, list[str]]] = [
    ("ON-OCJ", "Ontario Court of Justice", AuthorityType.COURT, ONTARIO, 30, ["ON-SC"]),
    ("ON-LTB", "Landlord and Tenant Board", AuthorityType.TRIBUNAL, ONTARIO, 30, ["ON-DivCt"]),
    ("ON-HRTO", "Human Rights Tribunal of Ontario", AuthorityType.TRIBUNAL, ONTARIO, 30, ["ON-DivCt"]),
    ("ON-SMALL", "Small Claims Court (Ontario)", AuthorityType.COURT, ONTARIO, 60, ["ON-DivCt"]),
    ("ON-SC", "Superior Court of Justice (Ontario)", AuthorityType.COURT, ONTARIO, 60, ["ON-CA"]),
    ("ON-DivCt", "Divisional Court (Ontario)", AuthorityType.COURT, ONTARIO, 60, ["ON-CA"]),
    ("ON-CA", "Court of Appeal for Ontario", AuthorityType.COURT, ONTARIO, 90, ["CA-SCC"]),
    ("CA-FC", "Federal Court", AuthorityType.COURT, FEDERAL, 90, ["CA-FCA"]),
    ("CA-FCA", "Federal Court of Appeal", AuthorityType.COURT, FEDERAL, 120, ["CA-SCC"]),
    ("CA-TCC", "Tax Court of Canada", AuthorityType.COURT, FEDERAL, 90, ["CA-FCA"]),
    ("CA-SCC", "Supreme Court of Canada", AuthorityType.COURT, FEDERAL, 180, []),
]


def initial_authorities(updated_at: datetime | None = None) -> list[Authority]:
    """Fresh Authority records for every seeded forum."""
    stamp = updated_at or utcnow()
    return [
        Authority(
            id=aid,
            name=name,
            type=atype,
            jurisdiction=jurisdiction,
            version="1.0.0",
            updated_at=stamp,
            update_cadence_days=cadence,
            escalation_routes=list(routes),
        )
        for aid, name, atype, jurisdiction, cadence, routes in _SEED
    ]


def build_default_registry(updated_at: datetime | None = None) -> AuthorityRegistry:
    return AuthorityRegistry(initial_authorities(updated_at))
