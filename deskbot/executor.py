"""Parametrized read queries behind each intent."""

from __future__ import annotations

from deskbot.models import DateRange, OrderRecord
from deskbot.store import ChatStore

DEFAULT_ORDER_LIMIT = 10


class StoreQueryError(RuntimeError):
    """Raised when the underlying store fails to answer a read."""


class QueryExecutor:
    """Runs payroll sums and order lookups against a ChatStore."""

    def __init__(self, store: ChatStore, order_limit: int = DEFAULT_ORDER_LIMIT) -> None:
        self._store = store
        self._order_limit = order_limit

    def sum_payroll(self, agent_id: int, date_range: DateRange) -> float:
        """Total payroll for ``agent_id`` with periods inside ``date_range``.

        Returns 0.0 when no rows match.
        """

        try:
            total = self._store.sum_payroll_in_range(agent_id, date_range.start, date_range.end)
        except Exception as exc:  # noqa: BLE001
            raise StoreQueryError(f"Payroll query failed: {exc}") from exc
        return float(total or 0)

    def find_orders(self, customer_name: str) -> list[OrderRecord]:
        try:
            orders = self._store.find_orders_by_name(customer_name, self._order_limit)
        except Exception as exc:  # noqa: BLE001
            raise StoreQueryError(f"Customer query failed: {exc}") from exc
        return list(orders)[: self._order_limit]
