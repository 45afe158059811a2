"""Chat orchestrator: classify, resolve, query, format, record."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable

from deskbot import formatting
from deskbot.executor import DEFAULT_ORDER_LIMIT, QueryExecutor, StoreQueryError
from deskbot.intents import classify, extract_customer_name
from deskbot.models import Intent
from deskbot.periods import resolve_period
from deskbot.store import ChatStore

LOGGER = logging.getLogger(__name__)


class ChatOrchestrator:
    """Single entry point that turns an operator message into a reply."""

    def __init__(
        self,
        store: ChatStore,
        clock: Callable[[], datetime] = datetime.now,
        order_limit: int = DEFAULT_ORDER_LIMIT,
    ) -> None:
        self._store = store
        self._clock = clock
        self._executor = QueryExecutor(store, order_limit=order_limit)

    async def handle_message(self, agent_id: int, text: str) -> str:
        """Answer one message and record the exchange.

        Raises:
            ValueError: if ``text`` is empty or whitespace only.
        """

        if not text or not text.strip():
            raise ValueError("Message is required")

        normalized = text.lower()
        intent = classify(normalized)
        LOGGER.info("Chat message: agent_id=%s intent=%s", agent_id, intent.value)

        if intent is Intent.PAYROLL:
            reply = await self._answer_payroll(agent_id, normalized)
        elif intent is Intent.CUSTOMER_ORDERS:
            reply = await self._answer_customer(normalized)
        else:
            reply = formatting.CAPABILITIES

        await self._record_turn(agent_id, text, reply)
        return reply

    async def _answer_payroll(self, agent_id: int, message: str) -> str:
        date_range = resolve_period(message, self._clock())
        if date_range is None:
            return formatting.PERIOD_HELP
        try:
            total = await asyncio.to_thread(self._executor.sum_payroll, agent_id, date_range)
        except StoreQueryError:
            LOGGER.exception("Payroll query error for agent_id=%s", agent_id)
            return formatting.PAYROLL_ERROR
        return formatting.format_payroll_summary(date_range, total)

    async def _answer_customer(self, message: str) -> str:
        customer_name = extract_customer_name(message)
        if not customer_name:
            return formatting.CUSTOMER_HELP
        try:
            orders = await asyncio.to_thread(self._executor.find_orders, customer_name)
        except StoreQueryError:
            LOGGER.exception("Customer query error for %r", customer_name)
            return formatting.CUSTOMER_ERROR
        return formatting.format_orders(customer_name, orders)

    async def _record_turn(self, agent_id: int, message: str, reply: str) -> None:
        try:
            await asyncio.to_thread(self._store.append_chat_turn, agent_id, message, reply)
        except Exception:  # noqa: BLE001
            LOGGER.exception("Error saving chat history for agent_id=%s", agent_id)
