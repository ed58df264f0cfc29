import logging
from datetime import datetime, timezone

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from app.db import get_db
from app.models.user import AuthToken, User

log = logging.getLogger(__name__)


def _as_utc(dt: datetime) -> datetime:
    # sqlite hands back naive datetimes
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def get_bearer_token(authorization: str | None = Header(None)) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Not authenticated")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Invalid authorization header")
    return token.strip()


def get_current_user(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> User:
    row = db.query(AuthToken).filter(AuthToken.token == token).first()
    if not row:
        raise HTTPException(status_code=401, detail="Invalid token")
    if _as_utc(row.expires_at) <= datetime.now(timezone.utc):
        log.info(f"[AUTH] Expired token for user {row.user_id}")
        db.delete(row)
        db.commit()
        raise HTTPException(status_code=401, detail="Token expired")
    user = db.query(User).filter(User.id == row.user_id).first()
    if not user:
        raise HTTPException(status_code=401, detail="Invalid token")
    return user
