"""Text templates for chat replies.

Every reply is deterministic for its inputs. Amounts always render with two
decimals and a bare "$" prefix.
"""

from __future__ import annotations

from typing import Iterable

from deskbot.models import DateRange, OrderRecord

PERIOD_HELP = (
    "I couldn't understand the time period. Please specify 'this week', 'this month', "
    "'this year', 'last month', or use 'from YYYY-MM-DD to YYYY-MM-DD' format."
)
CUSTOMER_HELP = (
    "Please specify a customer name. For example: 'Show orders for John Smith' "
    "or 'Customer John Smith'"
)
CAPABILITIES = (
    "I can help you with payroll information and customer order details. Try asking about:\n"
    "• Payroll for this week, month, year, or last month\n"
    "• Orders for a specific customer\n"
    "• Custom date ranges for payroll"
)
PAYROLL_ERROR = "Sorry, I encountered an error while fetching payroll information."
CUSTOMER_ERROR = "Sorry, I encountered an error while fetching customer information."


def format_amount(amount: float) -> str:
    return f"${amount:.2f}"


def format_payroll_summary(date_range: DateRange, total: float) -> str:
    return (
        f"**{date_range.label} Payroll Summary**\n\n"
        f"Total Amount: {format_amount(total)}\n"
        f"Period: {date_range.start} to {date_range.end}"
    )


def format_no_orders(customer_name: str) -> str:
    return f"No orders found for customer: {customer_name}"


def format_orders(customer_name: str, orders: Iterable[OrderRecord]) -> str:
    """Render orders as a numbered list, or the no-results line when empty."""

    orders = list(orders)
    if not orders:
        return format_no_orders(customer_name)

    lines = [f"**Orders for {customer_name}**", ""]
    for index, order in enumerate(orders, start=1):
        lines.append(f"{index}. **{order.project_name}**")
        lines.append(f"   Date: {order.order_date}")
        lines.append(f"   Amount: {format_amount(order.amount)}")
        lines.append(f"   Status: {order.status}")
        if order.description:
            lines.append(f"   Description: {order.description}")
        lines.append("")
    return "\n".join(lines).rstrip()
