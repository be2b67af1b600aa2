import logging

from fastapi import APIRouter, Depends

from ..auth import CredentialVerifier, derive_email, issue_token
from ..dependencies import get_credential_verifier
from ..errors import InternalFailure, ServiceError
from ..schemas import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

# Mock user store has no ids
MOCK_USER_ID = 1


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """Check credentials and return the user profile with a session token"""
    logger.info(f"Login attempt - Username: {request.username}")
    try:
        role = verifier.verify(request.username, request.password)
        return LoginResponse(
            id=MOCK_USER_ID,
            username=request.username,
            email=derive_email(request.username),
            role=role,
            token=issue_token(),
        )
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Login failed for '{request.username}': {e}", exc_info=True)
        raise InternalFailure("Login failed")
