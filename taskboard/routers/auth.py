from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.schemas.tokens import Token
from taskboard.schemas.user import UserLogin, UserOut
from taskboard.utils.auth import get_current_user
from taskboard.utils.security import verify_password, create_access_token

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=Token)
def login(user: UserLogin, db: Session = Depends(get_db)):
    db_user = db.query(User).filter(User.email == user.email).first()
    if not db_user or not verify_password(user.password, db_user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token(data={"sub": db_user.email})
    return {
        "access_token": token,
        "token_type": "bearer",
        "user": db_user,
    }

@router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    """Get the authenticated user"""
    return current_user
