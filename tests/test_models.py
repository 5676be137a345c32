from datetime import timezone

import pytest
from pydantic import ValidationError

from order_ledger.core.errors import InvalidAmount, InvalidInput
from order_ledger.models.order import Order, Payment
from order_ledger.utils.money import from_cents, to_cents


def test_payment_timestamp_is_utc():
    payment = Payment(id="ab", amount_cents=500)
    assert payment.applied_at.tzinfo == timezone.utc
    assert payment.amount == 5.0
    assert payment.note is None


def test_payment_is_immutable():
    payment = Payment(id="ab", amount_cents=500)
    with pytest.raises(ValidationError):
        payment.amount_cents = 1


def test_order_id_and_total_are_immutable():
    order = Order(id="ab", description="Widget", total_cents=1000, balance_due_cents=1000)
    with pytest.raises(ValidationError):
        order.id = "cd"
    with pytest.raises(ValidationError):
        order.total_cents = 1
    assert (order.id, order.total_cents) == ("ab", 1000)


def test_balance_due_cannot_go_negative():
    order = Order(id="ab", description="Widget", total_cents=1000, balance_due_cents=1000)
    with pytest.raises(ValidationError):
        order.balance_due_cents = -1


def test_order_helpers():
    order = Order(id="ab", description="Widget", total_cents=1000, balance_due_cents=1000)
    assert order.total == 10.0
    assert not order.is_settled()
    assert order.amount_paid_cents() == 0

    order.payments_applied.append(Payment(id="p1", amount_cents=1000))
    order.balance_due_cents = 0
    assert order.is_settled()
    assert order.amount_paid_cents() == 1000


def test_order_dump_includes_currency_views():
    order = Order(id="ab", description="Widget", total_cents=1050, balance_due_cents=25)
    data = order.model_dump()
    assert data["total"] == 10.5
    assert data["balance_due"] == 0.25


@pytest.mark.parametrize(
    "value,cents",
    [(40, 4000), (40.0, 4000), (0.1, 10), (0.01, 1), (60.0, 6000), (12.34, 1234), (1e6, 100000000)],
)
def test_to_cents(value, cents):
    assert to_cents(value) == cents


@pytest.mark.parametrize(
    "value",
    [0, -1.0, -0.01, float("nan"), float("inf"), "10", None, True, 1e40],
)
def test_to_cents_rejects(value):
    with pytest.raises(InvalidAmount):
        to_cents(value)


@pytest.mark.parametrize("value", [0.001, 60.004, 10.005, 12.345678])
def test_to_cents_rejects_fractions_of_a_cent(value):
    with pytest.raises(InvalidAmount) as exc_info:
        to_cents(value)
    assert "at most 2 decimal places" in str(exc_info.value)


def test_invalid_amount_is_invalid_input():
    with pytest.raises(InvalidInput):
        to_cents(-5, field="total")


def test_from_cents():
    assert from_cents(6000) == 60.0
    assert from_cents(1) == 0.01
