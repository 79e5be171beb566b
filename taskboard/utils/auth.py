# taskboard/utils/auth.py
import logging
from typing import Iterable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from taskboard.config.settings import settings
from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)

ADMIN_ONLY = (settings.ADMIN_ROLE,)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        email: str = payload.get("sub")
        if email is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = db.query(User).filter(User.email == email).first()
    if user is None:
        raise credentials_exception

    return user

def authorize(*roles: str):
    """Dependency factory: only callers whose role is in `roles` get through"""

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            logger.warning(f"Role {current_user.role} denied (allowed: {', '.join(roles)})")
            raise UnauthorizedError(f"User role {current_user.role} is not authorized to access this route")
        return current_user

    return role_checker

def can_access(caller: User, owner_id: Optional[int] = None, allowed_roles: Iterable[str] = ADMIN_ONLY) -> bool:
    """Allow when the caller has one of `allowed_roles` or is the resource owner"""
    if caller.role in allowed_roles:
        return True
    return owner_id is not None and caller.id == owner_id

def require_access(
    caller: User,
    message: str,
    owner_id: Optional[int] = None,
    allowed_roles: Iterable[str] = ADMIN_ONLY,
) -> None:
    if not can_access(caller, owner_id, allowed_roles):
        logger.warning(f"User {caller.id} ({caller.role}) denied: {message}")
        raise UnauthorizedError(message)
