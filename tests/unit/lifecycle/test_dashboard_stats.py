from __future__ import annotations

import itertools
from datetime import date, datetime
from decimal import Decimal

import pytest

from app.core.exceptions import ValidationError
from app.lifecycle.derived import aggregate_dashboard_stats, filter_urgent, summarize_invoices

NOW = datetime(2024, 6, 1, 12, 0, 0)


def _follow_up(ident, priority, due, completed=False):
    return {"id": ident, "priority": priority, "due_date": due, "completed": completed}


def test_filter_urgent_keeps_open_high_priority_in_due_order():
    items = [
        _follow_up(1, "urgent", datetime(2024, 6, 5)),
        _follow_up(2, "urgent", datetime(2024, 6, 2)),
        _follow_up(3, "urgent", datetime(2024, 6, 1), completed=True),
        _follow_up(4, "low", datetime(2024, 5, 1)),
        _follow_up(5, "urgent", datetime(2024, 6, 3)),
    ]
    result = filter_urgent(items, NOW, limit=2)
    assert [item["id"] for item in result] == [2, 5]


def test_filter_urgent_includes_high_priority():
    items = [
        _follow_up(1, "high", datetime(2024, 6, 2)),
        _follow_up(2, "medium", datetime(2024, 6, 1)),
    ]
    assert [item["id"] for item in filter_urgent(items, NOW)] == [1]


def test_filter_urgent_ties_keep_input_order():
    due = datetime(2024, 6, 2)
    items = [_follow_up(ident, "urgent", due) for ident in (7, 3, 9)]
    assert [item["id"] for item in filter_urgent(items, NOW)] == [7, 3, 9]


def test_filter_urgent_places_undated_last():
    items = [
        _follow_up(1, "urgent", None),
        _follow_up(2, "high", date(2024, 6, 3)),
    ]
    assert [item["id"] for item in filter_urgent(items, NOW)] == [2, 1]


def test_filter_urgent_limit_edges():
    items = [_follow_up(1, "urgent", datetime(2024, 6, 2))]
    assert filter_urgent(items, NOW, limit=0) == []
    assert filter_urgent([], NOW, limit=5) == []
    with pytest.raises(ValidationError):
        filter_urgent(items, NOW, limit=-1)


def _dataset():
    orders = [
        {"status": "needs_truck", "customer_rate": "1000"},
        {"status": "in_transit", "customer_rate": "1500"},
        {"status": "delivered", "customer_rate": "2450.00", "delivery_date": date(2024, 5, 10)},
        {"status": "delivered", "customer_rate": "800.50", "delivery_date": date(2024, 4, 20)},
    ]
    quotes = [
        {"status": "draft", "valid_until": date(2024, 7, 1)},
        {"status": "sent", "valid_until": date(2024, 5, 1)},
        {"status": "sent", "valid_until": None},
        {"status": "accepted", "valid_until": date(2024, 1, 1)},
    ]
    invoices = [
        {"status": "draft", "due_date": None},
        {"status": "sent", "due_date": date(2024, 5, 1)},
        {"status": "sent", "due_date": date(2024, 7, 1)},
        {"status": "paid", "due_date": date(2024, 5, 1)},
    ]
    return orders, quotes, invoices


def test_aggregate_dashboard_stats_counts():
    orders, quotes, invoices = _dataset()
    stats = aggregate_dashboard_stats(orders, quotes, invoices, NOW)
    assert stats.active_orders == 2
    assert stats.in_transit == 1
    assert stats.pending_quotes == 2
    assert stats.revenue == Decimal("3250.50")
    assert stats.pending_invoices == 2
    assert stats.overdue_invoices == 1


def test_revenue_respects_half_open_period():
    orders, quotes, invoices = _dataset()
    may = (date(2024, 5, 1), date(2024, 6, 1))
    assert aggregate_dashboard_stats(orders, quotes, invoices, NOW, period=may).revenue == Decimal("2450.00")
    boundary = (date(2024, 4, 20), date(2024, 5, 10))
    assert aggregate_dashboard_stats(orders, quotes, invoices, NOW, period=boundary).revenue == Decimal("800.50")


def test_aggregate_is_order_independent():
    orders, quotes, invoices = _dataset()
    expected = aggregate_dashboard_stats(orders, quotes, invoices, NOW)
    for permutation in itertools.permutations(orders):
        shuffled = aggregate_dashboard_stats(list(permutation), list(reversed(quotes)), invoices[::-1], NOW)
        assert shuffled == expected


def test_aggregate_of_empty_collections():
    stats = aggregate_dashboard_stats([], [], [], NOW)
    assert stats.as_dict() == {
        "active_orders": 0,
        "in_transit": 0,
        "pending_quotes": 0,
        "revenue": Decimal("0"),
        "pending_invoices": 0,
        "overdue_invoices": 0,
    }


def test_summarize_invoices():
    invoices = [
        {"type": "customer", "status": "sent", "amount": "100.00", "due_date": date(2024, 5, 1)},
        {"type": "customer", "status": "draft", "amount": "50.25", "due_date": None},
        {"type": "carrier", "status": "paid", "amount": "900", "due_date": date(2024, 5, 1)},
    ]
    summary = summarize_invoices(invoices, NOW)
    assert summary.total_customer == 2
    assert summary.total_carrier == 1
    assert summary.pending_amount == Decimal("150.25")
    assert summary.overdue_count == 1
