import logging
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.deps import get_bearer_token, get_current_user
from app.core.config import settings
from app.core.security import hash_password, new_token, verify_password
from app.db import get_db
from app.models.user import AuthToken, User
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserRead

log = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(db: Session, user: User) -> TokenResponse:
    token = AuthToken(
        token=new_token(),
        user_id=user.id,
        expires_at=datetime.now(timezone.utc) + timedelta(hours=settings.token_ttl_hours),
    )
    db.add(token)
    db.commit()
    return TokenResponse(token=token.token, user=UserRead.model_validate(user))


@router.post("/register", response_model=TokenResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    email = payload.email.strip().lower()
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(
        email=email,
        full_name=payload.full_name,
        password_hash=hash_password(payload.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")
    db.refresh(user)
    log.info(f"[AUTH] Registered user {user.id}")
    return _issue_token(db, user)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    email = payload.email.strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(payload.password, user.password_hash):
        log.warning(f"[AUTH] Failed login for {email}")
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _issue_token(db, user)


@router.post("/logout", status_code=204)
def logout(
    token: str = Depends(get_bearer_token),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    db.query(AuthToken).filter(AuthToken.token == token).delete()
    db.commit()
    return Response(status_code=204)


@router.get("/me", response_model=UserRead)
def me(user: User = Depends(get_current_user)):
    return user
