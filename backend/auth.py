"""
Authentication module for JWT and API key validation.
Provides FastAPI dependencies for securing endpoints.

Every authenticated request resolves to a profile id:
- X-API-Key: "key" (profile "admin") or "key:profile_id"
- Authorization: "Bearer <HS256 JWT>" whose "sub" claim is the profile id
"""
import jwt
from fastapi import Depends, HTTPException, Header
from typing import Optional
import logging

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
DEFAULT_API_KEY_PROFILE = "admin"


def get_current_profile(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Authenticate via API key OR bearer JWT.
    Returns profile_id string.

    Usage:
        @app.get("/protected")
        def protected_route(profile_id: str = Depends(get_current_profile)):
            return {"profile_id": profile_id}
    """
    # Option 1: API Key authentication
    if x_api_key:
        return validate_api_key(x_api_key, settings)

    # Option 2: JWT authentication
    if authorization:
        return validate_jwt(authorization, settings)

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


def validate_api_key(api_key: str, settings: Settings) -> str:
    """
    Validate API key and return profile_id.

    API key format options:
    - Simple: "sk_test_abc123" -> returns "admin"
    - With profile: "sk_test_abc123:profile_12345" -> returns "profile_12345"
    """
    valid_keys = settings.api_keys_list

    if not valid_keys:
        logger.warning("No API keys configured (API_KEYS env var empty)")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    # Check if key (without profile suffix) is valid
    key_part = api_key.split(":")[0]

    if key_part not in valid_keys:
        raise HTTPException(status_code=401, detail="Invalid API key")

    # Extract profile_id if provided (format: "key:profile_id")
    if ":" in api_key:
        profile_id = api_key.split(":", 1)[1]
        if not profile_id:
            raise HTTPException(status_code=401, detail="API key missing profile ID")
        return profile_id

    return DEFAULT_API_KEY_PROFILE


def validate_jwt(authorization: str, settings: Settings) -> str:
    """Validate an HS256 bearer token and return profile_id."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]

    options = {}
    if not settings.jwt_audience:
        options["verify_aud"] = False

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[JWT_ALGORITHM],
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    profile_id = payload.get("sub")
    if not profile_id:
        raise HTTPException(status_code=401, detail="Token missing profile ID")
    logger.debug(f"JWT validated for profile: {profile_id}")
    return profile_id


def create_access_token(profile_id: str, settings: Settings, **claims) -> str:
    """
    Issue an HS256 token for a profile.

    Used by the CLI and tests; the issuer/audience claims follow settings.
    """
    payload = {"sub": profile_id, **claims}
    if settings.jwt_issuer:
        payload.setdefault("iss", settings.jwt_issuer)
    if settings.jwt_audience:
        payload.setdefault("aud", settings.jwt_audience)
    return jwt.encode(payload, settings.jwt_secret, algorithm=JWT_ALGORITHM)
