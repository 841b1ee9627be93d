import os
from jose import JWTError, jwt
from datetime import datetime, timedelta
from typing import Optional
from dotenv import load_dotenv
from contestpro.models.auth.token import TokenData

# Load environment variables
load_dotenv()

# Get environment variables
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))


def get_secret_key() -> str:
    """Signing secret, read on use so a missing value fails the request rather than the import"""
    secret_key = os.getenv("ACCESS_TOKEN_SECRET")
    if not secret_key:
        raise ValueError("ACCESS_TOKEN_SECRET is not configured")
    return secret_key


class SecurityService:
    """Service for signing and verifying access tokens"""

    @staticmethod
    def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Create JWT access token from the given claims"""
        to_encode = data.copy()

        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

        to_encode.update({"exp": expire})
        encoded_jwt = jwt.encode(to_encode, get_secret_key(), algorithm=ALGORITHM)
        return encoded_jwt

    @staticmethod
    def verify_token(token: str) -> Optional[TokenData]:
        """Verify and decode JWT token"""
        try:
            payload = jwt.decode(token, get_secret_key(), algorithms=[ALGORITHM])
        except JWTError as e:
            print(f"[ERROR] JWT verification failed: {e}")
            return None

        email: str = payload.get("email")
        if email is None:
            return None

        return TokenData(email=email)


security_service = SecurityService()
