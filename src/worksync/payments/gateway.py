from __future__ import annotations

import logging
from typing import Protocol

import stripe

from ..core.exceptions import PaymentError

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def create_payment_intent(self, *, amount: int, currency: str) -> str:
        """Create a card payment intent for ``amount`` minor units and return its client secret."""

        raise NotImplementedError


class StripePaymentGateway(PaymentGateway):
    def __init__(self, api_key: str):
        self._api_key = api_key

    def create_payment_intent(self, *, amount: int, currency: str) -> str:
        if not self._api_key:
            raise PaymentError("payment processor is not configured")
        try:
            intent = stripe.PaymentIntent.create(
                api_key=self._api_key,
                amount=amount,
                currency=currency,
                payment_method_types=["card"],
            )
        except stripe.StripeError as e:
            logger.error("stripe rejected payment intent (amount=%s %s): %s", amount, currency, e)
            raise PaymentError("payment processor error")
        return intent.client_secret
