"""
Payment Routes
API endpoints for payment operations
"""
from fastapi import APIRouter, Depends

from contestpro.models.payment.payment_intent import PaymentIntentRequest, PaymentIntentResponse
from contestpro.services.payment.payment_service import PaymentService
from contestpro.services.payment.gateways.factory import get_payment_gateway

router = APIRouter(tags=["Payments"])


def get_payment_service() -> PaymentService:
    """Payment service dependency"""
    return PaymentService(get_payment_gateway())


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payment_request: PaymentIntentRequest,
    payment_service: PaymentService = Depends(get_payment_service)
):
    """
    Create a card payment intent for a contest entry fee.
    price is in dollars; the gateway is charged in cents.
    """
    client_secret = await payment_service.create_payment_intent(payment_request.price)
    return PaymentIntentResponse(clientSecret=client_secret)
