# backend/routers/users_router.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.core.security import hash_password, require_role
from backend.database.session import get_db
from backend.models.user_model import User
from backend.schemas.auth import UserOut
from backend.schemas.users import UserCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_role("admin"))])


@router.get("")
def list_users(db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.username).all()
    return ok([UserOut.model_validate(u) for u in users])


@router.post("", status_code=201)
def create_user(body: UserCreate, db: Session = Depends(get_db)):
    if db.query(User).filter(User.username == body.username).count() > 0:
        raise HTTPException(status_code=400, detail="Username already in use")
    if body.email and db.query(User).filter(User.email == body.email).count() > 0:
        raise HTTPException(status_code=400, detail="Email already in use")

    user = User(
        username=body.username,
        email=body.email,
        password=hash_password(body.password),
        role=body.role,
    )
    db.add(user)
    commit_or_500(db, "Error creating user")
    db.refresh(user)
    logger.info("User %s created with role %s", user.username, user.role)
    return ok(UserOut.model_validate(user))
