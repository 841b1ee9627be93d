"""
Stripe Payment Gateway Implementation
Implements the BasePaymentGateway over the Stripe REST API
"""
import os
import httpx
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from contestpro.services.payment.gateways.base import (
    BasePaymentGateway,
    PaymentIntentResult
)

load_dotenv()


class StripeGateway(BasePaymentGateway):
    """
    Stripe Payment Gateway Implementation

    Creates card payment intents; the frontend confirms them with the
    returned client secret through Stripe.js.
    """

    gateway_id = "stripe"
    gateway_name = "Stripe"

    API_URL = "https://api.stripe.com/v1"

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize Stripe gateway"""
        env_config = self._load_config_from_env()

        # Merge with provided config (override non-credential settings)
        if config is not None:
            env_config.update({
                k: v for k, v in config.items()
                if k != "secret_key" and v is not None
            })

        super().__init__(env_config)

        self.secret_key = self.config.get("secret_key")
        self.timeout = self.config.get("timeout", 30.0)
        self._transport = transport

    def _load_config_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        secret_key = os.getenv("STRIPE_SECRET_KEY")

        if not secret_key:
            print("[WARN] STRIPE_SECRET_KEY not found in environment")

        return {
            "secret_key": secret_key,
            "api_url": os.getenv("STRIPE_API_URL", self.API_URL),
        }

    def _validate_config(self):
        """Validate required Stripe configuration"""
        if not self.config.get("secret_key"):
            raise ValueError("STRIPE_SECRET_KEY is required")

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for Stripe API requests"""
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Accept": "application/json"
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def create_payment_intent(
        self,
        amount: int,
        currency: str = "usd",
        payment_method_types: Optional[list] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> PaymentIntentResult:
        """
        Create a Stripe payment intent.
        Stripe expects form-encoded bodies with bracketed keys for lists and maps.
        """
        payload = {
            "amount": str(amount),
            "currency": currency,
        }
        for index, method in enumerate(payment_method_types or ["card"]):
            payload[f"payment_method_types[{index}]"] = method
        for key, value in (metadata or {}).items():
            payload[f"metadata[{key}]"] = str(value)

        try:
            async with self._client() as client:
                response = await client.post(
                    self.get_api_url("/payment_intents"),
                    headers=self._get_headers(),
                    data=payload
                )
                response_data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            return PaymentIntentResult(
                success=False,
                error_message=str(e)
            )

        if response.status_code in [200, 201]:
            return PaymentIntentResult(
                success=True,
                intent_id=response_data.get("id"),
                client_secret=response_data.get("client_secret"),
                status=response_data.get("status"),
                raw_response=response_data
            )

        error_msg = (response_data.get("error") or {}).get("message", "Unknown error")
        return PaymentIntentResult(
            success=False,
            error_message=error_msg,
            raw_response=response_data
        )
