"""
Payment Intent Models
Request/response bodies for contest entry fee payments
"""
from pydantic import BaseModel


class PaymentIntentRequest(BaseModel):
    """Entry fee in major currency units (e.g. dollars)"""
    price: float


class PaymentIntentResponse(BaseModel):
    """Client secret the frontend confirms the card payment with"""
    clientSecret: str
