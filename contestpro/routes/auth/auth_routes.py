from fastapi import APIRouter

from contestpro.models.auth.token import TokenRequest, Token
from contestpro.services.auth.security import security_service

router = APIRouter(tags=["Authentication"])


@router.post("/jwt", response_model=Token)
async def issue_token(token_request: TokenRequest):
    """
    Sign an access token for the signed-in user.
    All submitted claims are kept; the token expires after an hour.
    """
    token = security_service.create_access_token(
        data=token_request.model_dump(mode="json")
    )
    return Token(token=token)
