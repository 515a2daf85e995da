# server/api/auth.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from passlib.context import CryptContext
from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import config
from core.errors import AuthenticationError, NotFoundError, ValidationError
from database import get_db
from models.user import User as UserModel


logger = logging.getLogger(__name__)

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)

MAX_PASSWORD_LENGTH = 128


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: str = Field(min_length=1, max_length=MAX_PASSWORD_LENGTH)
    hero_name: str = Field(alias="heroName", min_length=1, max_length=50)


class LoginRequest(BaseModel):
    email: str = Field(max_length=254)
    password: str = Field(max_length=MAX_PASSWORD_LENGTH)


@dataclass
class SessionClaim:
    email: str
    user_id: int


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def authenticate_user(db: Session, email: str, password: str) -> UserModel:
    user = db.query(UserModel).filter(UserModel.email == email).first()
    if not user:
        raise ValidationError("User not found")
    if not verify_password(password, user.hashed_password):
        raise ValidationError("Incorrect password")
    return user


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> SessionClaim:
    invalid = AuthenticationError("Invalid or expired token")
    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except JWTError:
        raise invalid

    email = payload.get("sub")
    user_id = payload.get("uid")
    if email is None or user_id is None:
        raise invalid
    return SessionClaim(email=email, user_id=user_id)


def get_current_claim(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SessionClaim:
    if credentials is None:
        if request.headers.get("Authorization"):
            raise AuthenticationError("Invalid or expired token")
        raise AuthenticationError("No token provided")
    return decode_access_token(credentials.credentials)


def get_current_user(
    claim: SessionClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
) -> UserModel:
    user = db.query(UserModel).filter(UserModel.email == claim.email).first()
    if not user:
        raise NotFoundError("User not found")
    return user


@router.post("/register")
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    email = str(req.email)
    user_exists = db.query(UserModel).filter(UserModel.email == email).first()
    if user_exists:
        raise ValidationError("Email already exists")

    new_user = UserModel(
        email=email,
        hashed_password=get_password_hash(req.password),
        hero_name=req.hero_name,
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if db.query(UserModel).filter(UserModel.email == email).first():
            raise ValidationError("Email already exists")
        logger.error("Registration rejected by the store", exc_info=True)
        raise

    logger.info("Registered hero %r (user %s)", new_user.hero_name, new_user.id)
    return {"success": True, "message": "User registered"}


@router.post("/login")
def login(req: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = authenticate_user(db, req.email, req.password)
    except ValidationError as e:
        logger.info("Failed login: %s", e.message)
        raise

    token = create_access_token(data={"sub": user.email, "uid": user.id})
    return {
        "success": True,
        "message": "Login successful",
        "token": token,
        "heroName": user.hero_name,
        "stats": user.stats,
        "level": user.level,
    }
