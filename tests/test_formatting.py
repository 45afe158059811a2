from deskbot.formatting import format_amount, format_no_orders, format_orders, format_payroll_summary
from deskbot.models import DateRange, OrderRecord

WEEK = DateRange("2024-01-14", "2024-01-20", "This Week")


def test_zero_total_renders_two_decimals():
    assert "Total Amount: $0.00" in format_payroll_summary(WEEK, 0)


def test_total_pads_to_two_decimals():
    assert "Total Amount: $1234.50" in format_payroll_summary(WEEK, 1234.5)


def test_amount_has_no_thousands_separator():
    assert format_amount(1234567.891) == "$1234567.89"


def test_payroll_summary_layout():
    assert format_payroll_summary(WEEK, 1200) == (
        "**This Week Payroll Summary**\n\n"
        "Total Amount: $1200.00\n"
        "Period: 2024-01-14 to 2024-01-20"
    )


def test_no_orders_message():
    assert format_no_orders("smith corp") == "No orders found for customer: smith corp"


def test_empty_order_list_uses_no_orders_message():
    assert format_orders("acme", []) == "No orders found for customer: acme"


def test_orders_are_numbered_and_skip_missing_description():
    orders = [
        OrderRecord("John Smith", "Website Redesign", "2024-01-15", 2500, "Completed", "Overhaul"),
        OrderRecord("John Smith", "Logo Design", "2024-01-10", 500, "Completed"),
    ]

    text = format_orders("john smith", orders)

    assert text == (
        "**Orders for john smith**\n"
        "\n"
        "1. **Website Redesign**\n"
        "   Date: 2024-01-15\n"
        "   Amount: $2500.00\n"
        "   Status: Completed\n"
        "   Description: Overhaul\n"
        "\n"
        "2. **Logo Design**\n"
        "   Date: 2024-01-10\n"
        "   Amount: $500.00\n"
        "   Status: Completed"
    )
