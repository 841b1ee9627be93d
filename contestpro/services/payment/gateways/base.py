"""
Payment gateway contract
Every provider turns an entry fee in minor units into a client-confirmable payment intent
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List
from dataclasses import dataclass


@dataclass
class PaymentIntentResult:
    """Outcome of one create-intent call; client_secret is set only on success"""
    success: bool
    intent_id: Optional[str] = None
    client_secret: Optional[str] = None
    status: Optional[str] = None
    error_message: Optional[str] = None
    raw_response: Optional[Dict[str, Any]] = None


def to_minor_units(price: float) -> int:
    """
    Convert a major-unit price to minor units, truncating toward zero.

    10 -> 1000, 9.999 -> 999. No range checks are applied.
    """
    return int(price * 100)


class BasePaymentGateway(ABC):
    """
    A payment provider reachable over HTTP.

    Subclasses read their credentials in __init__ and pass the resulting
    settings here; a gateway that fails _validate_config is never built.
    """

    gateway_id: str = "base"
    gateway_name: str = "Base Gateway"

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self._validate_config()

    @abstractmethod
    def _validate_config(self):
        """Raise ValueError when a required setting is missing"""

    @abstractmethod
    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        payment_method_types: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> PaymentIntentResult:
        """
        Open a payment intent for amount minor units of currency.

        Provider and transport failures are reported through
        PaymentIntentResult.success rather than raised.
        """

    def get_api_url(self, endpoint: str) -> str:
        """Join the configured api_url and an endpoint path"""
        base_url = self.config.get("api_url", "")
        return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
