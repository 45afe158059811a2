"""Keyword intent classification and customer-name extraction."""

from __future__ import annotations

from typing import Callable

from deskbot.models import Intent

PAYROLL_KEYWORDS = ("payroll", "salary", "payment", "earnings", "income")
TIME_KEYWORDS = ("week", "month", "year", "period", "range")
CUSTOMER_KEYWORDS = ("customer", "client", "order", "project", "work")


def _mentions_any(keywords: tuple[str, ...]) -> Callable[[str], bool]:
    return lambda text: any(keyword in text for keyword in keywords)


# Evaluated in order, first match wins. Time words route to payroll, so
# "show this month's orders" is a payroll question.
INTENT_RULES: tuple[tuple[Callable[[str], bool], Intent], ...] = (
    (_mentions_any(PAYROLL_KEYWORDS + TIME_KEYWORDS), Intent.PAYROLL),
    (_mentions_any(CUSTOMER_KEYWORDS), Intent.CUSTOMER_ORDERS),
)


def classify(message: str) -> Intent:
    """Return the first intent whose rule matches the lower-cased message."""

    text = message.lower()
    for predicate, intent in INTENT_RULES:
        if predicate(text):
            return intent
    return Intent.UNKNOWN


def extract_customer_name(message: str) -> str:
    """Return the lower-cased text after the first trigger token.

    "customer" takes precedence over "for". An empty string means no name was
    given.
    """

    text = message.lower()
    for trigger in ("customer", "for"):
        if trigger in text:
            _, _, suffix = text.partition(trigger)
            return suffix.strip()
    return ""
