"""
Payment gateway selection
Resolves the configured provider to a gateway instance, built once per process
"""
import os
from typing import Dict, Optional, Type
from dotenv import load_dotenv

from contestpro.services.payment.gateways.base import BasePaymentGateway
from contestpro.services.payment.gateways.stripe import StripeGateway

load_dotenv()

# Provider used for entry fees unless a caller names another
DEFAULT_GATEWAY = os.getenv("PAYMENT_GATEWAY", "stripe")

GATEWAYS: Dict[str, Type[BasePaymentGateway]] = {
    StripeGateway.gateway_id: StripeGateway,
}

_instances: Dict[str, BasePaymentGateway] = {}


def get_payment_gateway(gateway_id: Optional[str] = None) -> BasePaymentGateway:
    """
    Return the gateway registered as gateway_id, building it on first use.

    Raises:
        ValueError: unknown provider, or its credentials are missing
    """
    gateway_id = gateway_id or DEFAULT_GATEWAY
    if gateway_id not in GATEWAYS:
        raise ValueError(f"Unknown payment gateway: {gateway_id}. Available: {sorted(GATEWAYS)}")

    if gateway_id not in _instances:
        gateway = GATEWAYS[gateway_id]()
        print(f"[OK] {gateway.gateway_name} payment gateway ready")
        _instances[gateway_id] = gateway

    return _instances[gateway_id]


def reset_payment_gateways():
    """Forget built gateways so the next lookup re-reads the environment"""
    _instances.clear()
