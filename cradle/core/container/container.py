"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that belongs in the factory.

Design principles:
- Container serves, factory builds
- Fail fast: all construction at startup
- Type safety: fields are protocol types
- Testing: construct directly with fakes
"""

from dataclasses import dataclass

from cradle.domains.usage.protocols import (
    UsageLedgerProtocol,
    UsageLimitCheckerProtocol,
    UsageReportProtocol,
)


@dataclass(frozen=True)
class Container:
    """Immutable container holding all protocol implementations.

    Usage:
        # Production: use the global container built by the factory
        from cradle.core.container import container
        result = await container.usage_limit_checker.check_limit(db, user_id, limit_type)

        # Testing: construct directly with fakes (see conftest.py at the
        # repository root for the test_container fixture)
        test_container = Container(usage_limit_checker=FakeUsageLimitChecker(), ...)

        # FastAPI endpoints: use Inject() to pull individual protocols
        from cradle.api.deps import Inject
        async def my_endpoint(ledger: UsageLedgerProtocol = Inject(UsageLedgerProtocol)):
            ...
    """

    # Usage domain: read side, write side and reports
    usage_limit_checker: UsageLimitCheckerProtocol
    usage_ledger: UsageLedgerProtocol
    usage_report: UsageReportProtocol
