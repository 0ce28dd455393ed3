# backend/models/user_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.types import Unicode

from backend.database.session import Base


class User(Base):
    __tablename__ = "users"
    id         = Column(Integer, primary_key=True, index=True)
    username   = Column(Unicode(64), unique=True, nullable=False)
    email      = Column(Unicode(255), unique=True)
    password   = Column(Unicode(255), nullable=False)  # bcrypt hash
    role       = Column(Unicode(20), nullable=False, default="user")  # admin / manager / accountant / user
    created_at = Column(DateTime, default=datetime.now)
