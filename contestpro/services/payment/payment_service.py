"""
Payment Service
Creates entry fee payment intents through the configured gateway
"""
import os
from typing import Optional
from dotenv import load_dotenv

from contestpro.services.payment.gateways.base import BasePaymentGateway, to_minor_units
from contestpro.core.exceptions import PaymentGatewayError

load_dotenv()

PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "usd")


class PaymentService:
    """Service for contest entry fee payments"""

    def __init__(self, gateway: BasePaymentGateway, currency: Optional[str] = None):
        self.gateway = gateway
        self.currency = currency or PAYMENT_CURRENCY

    async def create_payment_intent(self, price: float) -> str:
        """
        Create a card payment intent for an entry fee and return its client secret.

        Raises PaymentGatewayError when the gateway rejects the request.
        """
        amount = to_minor_units(price)

        result = await self.gateway.create_payment_intent(
            amount=amount,
            currency=self.currency,
            payment_method_types=["card"]
        )

        if not result.success:
            print(f"[ERROR] {self.gateway.gateway_name} payment intent failed: {result.error_message}")
            raise PaymentGatewayError(result.error_message or PaymentGatewayError.message)

        return result.client_secret
