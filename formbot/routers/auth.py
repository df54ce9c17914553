from fastapi import APIRouter, HTTPException, Depends, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from typing import Optional

from formbot.config import Settings
from formbot.dependencies import get_db, get_settings
from formbot.exceptions import ConflictError
from formbot.logger import logger
from formbot.schemas.auth import LoginRequest, SignupRequest, TokenResponse, UsernameResponse
from formbot.services import user_service
from formbot.utils.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)

router = APIRouter(tags=["Authentication"])

# Reads "Authorization: Bearer <token>"; missing or non-bearer headers give None
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login", auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    config: Settings = Depends(get_settings),
) -> int:
    """Auth gate for protected routes. Attaches the principal id to the request."""
    if not token:
        logger.warning(f"No bearer token on {request.method} {request.url.path}")
        raise _unauthorized()

    try:
        user_id = decode_access_token(token, config)
    except InvalidTokenError as e:
        logger.warning(f"Rejected token on {request.method} {request.url.path}: {e}")
        raise _unauthorized()

    request.state.user_id = user_id
    return user_id


# API Routes
@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings),
):
    """Register a new user and return a bearer token"""
    try:
        user = user_service.create_user(
            db,
            username=payload.username,
            email=payload.email,
            password_hash=get_password_hash(payload.password, config),
        )
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"token": create_access_token(user.id, config)}


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings),
):
    """Exchange email and password for a bearer token"""
    user = user_service.get_user_by_email(db, payload.email)
    if not user:
        raise HTTPException(status_code=400, detail="User not found")

    if not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=400, detail="Invalid credentials")

    return {"token": create_access_token(user.id, config)}


@router.get("/username", response_model=UsernameResponse)
def read_username(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Username of the authenticated user"""
    user = user_service.get_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"username": user.username}
