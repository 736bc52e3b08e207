"""Tests for income commission arithmetic."""

from decimal import Decimal

from src.domain.models import ServiceLine
from src.domain.services.commission import compute_income_figures


def test_figures_split_payment_with_commission() -> None:
    """A 5% account keeps 10 of a 200 payment."""
    figures = compute_income_figures(
        [
            ServiceLine(name="LOGO", amount=Decimal("150")),
            ServiceLine(name="REDES", amount=Decimal("100")),
        ],
        Decimal("200"),
        Decimal("0.05"),
    )

    assert figures.total_contracted_amount == Decimal("250")
    assert figures.commission_amount == Decimal("10.00")
    assert figures.amount_with_commission == Decimal("190.00")
    assert figures.remaining_balance == Decimal("50")


def test_commission_and_net_add_up_to_payment() -> None:
    """Commission plus net amount always equals the amount paid."""
    for paid, rate in (("123.45", "0.035"), ("0", "0.1"), ("99.99", "0")):
        figures = compute_income_figures([], paid, rate)

        total = figures.commission_amount + figures.amount_with_commission
        assert total == Decimal(paid)


def test_overpayment_yields_negative_remaining_balance() -> None:
    """Paying more than contracted leaves a negative remaining balance."""
    figures = compute_income_figures(
        [ServiceLine(name="WEB", amount=Decimal("80"))], "100", "0"
    )

    assert figures.remaining_balance == Decimal("-20")
