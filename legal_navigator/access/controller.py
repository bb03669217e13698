"""
Source Access Control — Policy gate for official legal sources.

Every retrieval from CanLII, e-Laws or Justice Laws passes through this
controller before it happens. A service with no policy is denied; a
service whose policy does not list the requested access method is
denied. Denials are returned as values with a reason, never raised.

Every check, allowed or not, is appended to an in-memory access log so
the source manifest of a document package can show how each source was
reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from legal_navigator.matter.schema import (
    AccessLogRecord,
    AccessMethod,
    SourceAccessPolicy,
    SourceEntry,
    SourceService,
    utcnow,
)

logger = logging.getLogger(__name__)

NO_POLICY = "No policy"
METHOD_NOT_ALLOWED = "Method not allowed"


@dataclass
class AccessCheckResult:
    """Result of checking a service/method pair against its policy."""

    ok: bool
    service: SourceService
    method: AccessMethod
    timestamp: str
    reason: str | None = None

    def to_log_record(self) -> AccessLogRecord:
        return AccessLogRecord(
            service=self.service.value, method=self.method, timestamp=self.timestamp
        )


@dataclass
class SourceValidation:
    ok: bool
    errors: list[str] = field(default_factory=list)


class SourceAccessController:
    """Holds one access policy per service and logs every check."""

    def __init__(self, policies: list[SourceAccessPolicy] | None = None) -> None:
        self._policies: dict[SourceService, SourceAccessPolicy] = {}
        self._logs: list[AccessCheckResult] = []
        for policy in policies or []:
            self.set_policy(policy)

    def set_policy(self, policy: SourceAccessPolicy) -> None:
        """Install or replace the policy for ``policy.service``."""
        self._policies[policy.service] = policy
        logger.debug(
            "Access policy set for %s: %s",
            policy.service.value,
            [m.value for m in policy.allowed_methods],
        )

    def get_policy(self, service: SourceService) -> SourceAccessPolicy | None:
        return self._policies.get(service)

    def validate_access(self, service: SourceService, method: AccessMethod) -> AccessCheckResult:
        """
        Check whether ``method`` may be used to reach ``service``.

        Returns:
            AccessCheckResult with ``ok`` and, when denied, a reason of
            "No policy" or "Method not allowed".
        """
        policy = self._policies.get(service)
        if policy is None:
            reason = NO_POLICY
        elif method not in policy.allowed_methods:
            reason = METHOD_NOT_ALLOWED
        else:
            reason = None

        result = AccessCheckResult(
            ok=reason is None,
            service=service,
            method=method,
            timestamp=utcnow().isoformat(),
            reason=reason,
        )
        self._logs.append(result)
        if result.ok:
            logger.info("Source access allowed: %s via %s", service.value, method.value)
        else:
            logger.warning(
                "Source access denied: %s via %s (%s)", service.value, method.value, reason
            )
        return result

    def validate_source_entry(self, entry: SourceEntry) -> SourceValidation:
        """Check a source entry against the currency and bilingual rules of its policy."""
        policy = self._policies.get(entry.service)
        if policy is None:
            return SourceValidation(ok=False, errors=[NO_POLICY])

        errors: list[str] = []
        if policy.rules.enforce_currency_dates and not entry.retrieval_date:
            errors.append("Missing retrieval date for currency enforcement")
        if (
            entry.service == SourceService.JUSTICE_LAWS
            and policy.rules.enforce_bilingual_text
            and not entry.version
        ):
            errors.append("Missing version for bilingual text enforcement")
        return SourceValidation(ok=not errors, errors=errors)

    def get_logs(self) -> list[AccessCheckResult]:
        return list(self._logs)

    def access_log_records(self) -> list[AccessLogRecord]:
        """Allowed checks only, in the shape a SourceManifest carries."""
        return [r.to_log_record() for r in self._logs if r.ok]


def default_policies() -> list[SourceAccessPolicy]:
    """Official-API access to CanLII; official-site access to the statute portals."""
    return [
        SourceAccessPolicy(
            service=SourceService.CANLII,
            allowed_methods=[AccessMethod.OFFICIAL_API],
        ),
        SourceAccessPolicy(
            service=SourceService.E_LAWS,
            allowed_methods=[AccessMethod.OFFICIAL_SITE],
        ),
        SourceAccessPolicy(
            service=SourceService.JUSTICE_LAWS,
            allowed_methods=[AccessMethod.OFFICIAL_SITE],
        ),
    ]
