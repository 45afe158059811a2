"""Store interface consumed by the chat core."""

from __future__ import annotations

from abc import ABC, abstractmethod

from deskbot.models import OrderRecord


class ChatStore(ABC):
    """Read and append operations the orchestrator needs from persistence."""

    @abstractmethod
    def sum_payroll_in_range(self, agent_id: int, start: str, end: str) -> float:
        """Sum payroll amounts whose period lies inside [start, end]."""

    @abstractmethod
    def find_orders_by_name(self, customer_name: str, limit: int) -> list[OrderRecord]:
        """Return orders whose customer name contains ``customer_name``, newest first."""

    @abstractmethod
    def append_chat_turn(self, agent_id: int, message: str, response: str) -> None:
        """Persist one chat exchange."""
