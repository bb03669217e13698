"""Domain module lookup: one module per Domain, last registration wins."""

from __future__ import annotations

import logging

from legal_navigator.domains.base import BaseDomainModule
from legal_navigator.domains.civil_negligence import CivilNegligenceDomainModule
from legal_navigator.domains.criminal import CriminalDomainModule
from legal_navigator.domains.employment import EmploymentLawRouterModule
from legal_navigator.domains.insurance import InsuranceDomainModule
from legal_navigator.domains.landlord_tenant import LandlordTenantDomainModule
from legal_navigator.domains.ocpp import OCPPFilingModule
from legal_navigator.domains.tree_damage import TreeDamageClassifierModule
from legal_navigator.matter.schema import Domain

logger = logging.getLogger(__name__)


class DomainModuleRegistry:
    def __init__(self) -> None:
        self._modules: dict[Domain, BaseDomainModule] = {}

    def register(self, module: BaseDomainModule) -> None:
        if module.domain in self._modules:
            logger.info("Replacing domain module for %s", module.domain.value)
        self._modules[module.domain] = module

    def get(self, domain: Domain) -> BaseDomainModule | None:
        return self._modules.get(domain)

    def list(self) -> list[BaseDomainModule]:
        return list(self._modules.values())


def build_default_registry() -> DomainModuleRegistry:
    registry = DomainModuleRegistry()
    for module in (
        InsuranceDomainModule(),
        LandlordTenantDomainModule(),
        EmploymentLawRouterModule(),
        OCPPFilingModule(),
        TreeDamageClassifierModule(),
        CivilNegligenceDomainModule(),
        CriminalDomainModule(),
    ):
        registry.register(module)
    return registry
