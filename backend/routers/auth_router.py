# backend/routers/auth_router.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.core.responses import ok
from backend.core.security import create_access_token, get_current_user, verify_password
from backend.database.session import get_db
from backend.models.user_model import User
from backend.schemas.auth import LoginPayload, LoginResponse, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
def login(body: LoginPayload, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.username == body.username).first()
    # same answer for an unknown user and a wrong password
    if user is None or not verify_password(body.password, user.password):
        logger.info("Failed login for %r", body.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = create_access_token(user)
    return ok(LoginResponse(token=token, user=UserOut.model_validate(user)))


@router.get("/me")
def me(user: User = Depends(get_current_user)):
    return ok(UserOut.model_validate(user))
