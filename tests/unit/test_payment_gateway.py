"""Unit tests for the Stripe gateway, gateway selection and the payment service."""

from urllib.parse import parse_qs

import httpx
import pytest

from contestpro.core.exceptions import PaymentGatewayError
from contestpro.services.payment.gateways.base import PaymentIntentResult, to_minor_units
from contestpro.services.payment.gateways.factory import get_payment_gateway, reset_payment_gateways
from contestpro.services.payment.gateways.stripe import StripeGateway
from contestpro.services.payment.payment_service import PaymentService

pytestmark = [pytest.mark.unit]


def _gateway(handler) -> StripeGateway:
    return StripeGateway(transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "price, amount",
    [(10, 1000), (12.5, 1250), (9.999, 999), (0, 0), (-3, -300)],
)
def test_to_minor_units_truncates(price, amount):
    assert to_minor_units(price) == amount


class TestStripeGateway:
    async def test_creates_card_intent(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(
                200,
                json={"id": "pi_1", "client_secret": "pi_1_secret_2", "status": "requires_payment_method"},
            )

        result = await _gateway(handler).create_payment_intent(amount=1000, currency="usd")

        assert result.success is True
        assert result.client_secret == "pi_1_secret_2"
        assert result.intent_id == "pi_1"
        assert seen["url"] == "https://api.stripe.com/v1/payment_intents"
        assert seen["auth"] == "Bearer sk_test_contestpro"
        assert seen["form"] == {
            "amount": ["1000"],
            "currency": ["usd"],
            "payment_method_types[0]": ["card"],
        }

    async def test_metadata_is_form_encoded(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"id": "pi_1", "client_secret": "s"})

        await _gateway(handler).create_payment_intent(amount=500, currency="usd", metadata={"contest": "Essay"})

        assert seen["form"]["metadata[contest]"] == ["Essay"]

    async def test_error_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": {"message": "Amount must be at least $0.50 usd"}})

        result = await _gateway(handler).create_payment_intent(amount=1, currency="usd")

        assert result.success is False
        assert result.error_message == "Amount must be at least $0.50 usd"

    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await _gateway(handler).create_payment_intent(amount=1000, currency="usd")

        assert result.success is False
        assert "connection refused" in result.error_message

    def test_missing_secret_key(self, monkeypatch):
        monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)

        with pytest.raises(ValueError):
            StripeGateway()

    def test_config_cannot_override_secret_key(self):
        gateway = StripeGateway({"secret_key": "sk_live_other", "api_url": "https://stripe.internal/v1"})

        assert gateway.secret_key == "sk_test_contestpro"
        assert gateway.get_api_url("/payment_intents") == "https://stripe.internal/v1/payment_intents"


class TestGatewaySelection:
    def test_default_gateway_is_stripe(self):
        reset_payment_gateways()

        gateway = get_payment_gateway()

        assert isinstance(gateway, StripeGateway)
        assert get_payment_gateway("stripe") is gateway

    def test_reset_rebuilds(self):
        first = get_payment_gateway()
        reset_payment_gateways()

        assert get_payment_gateway() is not first

    def test_unknown_gateway(self):
        with pytest.raises(ValueError):
            get_payment_gateway("paypal")


class TestPaymentService:
    async def test_converts_price_to_cents(self, mock_gateway):
        client_secret = await PaymentService(mock_gateway).create_payment_intent(10)

        assert client_secret == "pi_test_123_secret_abc"
        mock_gateway.create_payment_intent.assert_awaited_once_with(
            amount=1000,
            currency="usd",
            payment_method_types=["card"],
        )

    async def test_gateway_failure(self, mock_gateway):
        mock_gateway.create_payment_intent.return_value = PaymentIntentResult(
            success=False,
            error_message="Invalid API Key provided",
        )

        with pytest.raises(PaymentGatewayError) as exc_info:
            await PaymentService(mock_gateway).create_payment_intent(10)

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Invalid API Key provided"
