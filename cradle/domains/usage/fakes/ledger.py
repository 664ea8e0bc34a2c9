"""Fake usage ledger for testing.

Records all calls for assertions without touching the database.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domains.usage.protocols import UsageLedgerProtocol
from cradle.domains.usage.types import LimitType


class FakeUsageLedger(UsageLedgerProtocol):
    """Test implementation of UsageLedgerProtocol.

    Usage:
        ledger = FakeUsageLedger()
        await some_handler(ledger=ledger)

        assert ledger.recorded[(user_id, LimitType.MESSAGE)] == 1
    """

    def __init__(self) -> None:
        """Initialize empty recording state."""
        self.recorded: dict[tuple[UUID, LimitType], float] = defaultdict(int)
        self.record_calls: list[tuple[UUID, LimitType, Union[int, float]]] = []

    async def increment_usage(
        self,
        db: AsyncSession,
        user_id: UUID,
        limit_type: LimitType,
        amount: Union[int, float] = 1,
    ) -> None:
        """Record a usage increment."""
        limit_type = LimitType(limit_type)
        self.record_calls.append((user_id, limit_type, amount))
        self.recorded[(user_id, limit_type)] += amount

    def clear(self) -> None:
        """Reset all recorded state."""
        self.recorded.clear()
        self.record_calls.clear()
