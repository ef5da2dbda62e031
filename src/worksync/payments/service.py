from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..common.validators import require_positive_decimal
from ..core.constants import DEFAULT_CURRENCY
from ..core.exceptions import ValidationError
from .gateway import PaymentGateway


def to_minor_units(amount: Decimal) -> int:
    """12.345 -> 1235 (cents, half-up)."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentService:
    """Use case: turn a salary amount into a processor payment intent."""

    def __init__(self, gateway: PaymentGateway, *, currency: str = DEFAULT_CURRENCY):
        self._gateway = gateway
        self._currency = currency

    def create_intent(self, payload: dict[str, Any]) -> str:
        amount = require_positive_decimal(payload.get("salary"), "salary")
        minor = to_minor_units(amount)
        if minor <= 0:
            raise ValidationError("salary is too small to charge")
        return self._gateway.create_payment_intent(amount=minor, currency=self._currency)
