"""Core domain models used across layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Intent(str, Enum):
    """Classified purpose of an operator message."""

    PAYROLL = "payroll"
    CUSTOMER_ORDERS = "customer_orders"
    UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class DateRange:
    """Inclusive period bounds as YYYY-MM-DD strings plus a display label."""

    start: str
    end: str
    label: str


@dataclass(slots=True)
class PayrollRecord:
    """One payroll payment for an agent."""

    agent_id: int
    amount: float
    period_start: str
    period_end: str
    payment_date: str


@dataclass(slots=True)
class OrderRecord:
    """A customer order as stored in the orders table."""

    customer_name: str
    project_name: str
    order_date: str
    amount: float
    status: str
    description: str | None = None


@dataclass(slots=True)
class ChatTurn:
    """Persisted (message, response) exchange for an agent."""

    agent_id: int
    message: str
    response: str
    timestamp: str
