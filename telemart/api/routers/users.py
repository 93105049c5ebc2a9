from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from telemart.api.deps import get_session_store, session_token
from telemart.data.database import get_db
from telemart.domain.schemas import LoginIn, LoginOut, MessageOut, UserCreate, UserCreated
from telemart.services.session_service import SessionStore
from telemart.services.user_service import UserService
from telemart.utils.logging import get_logger
from telemart.utils.security import sign_token
from telemart.utils.settings import (
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    SESSION_COOKIE_NAME,
    SESSION_MAX_AGE_SECONDS,
)

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.post("/newuser", response_model=UserCreated, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    user = UserService(db).register(payload)
    return {"message": "User created successfully", "user": user}


@router.post("/login", response_model=LoginOut)
def login(
    payload: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    old_token: str | None = Depends(session_token),
    store: SessionStore = Depends(get_session_store),
):
    user_id = UserService(db).authenticate(payload)

    # nowa sesja przy kazdym logowaniu
    if old_token:
        store.destroy(old_token)
    token = store.create({"userId": user_id})

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=sign_token(token),
        max_age=SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
    )
    logger.info(f"User {user_id} logged in")
    return {"message": "Login successful", "user_id": user_id}


@router.post("/logout", response_model=MessageOut)
def logout(
    response: Response,
    token: str | None = Depends(session_token),
    store: SessionStore = Depends(get_session_store),
):
    if token:
        store.destroy(token)

    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
    )
    return {"message": "Logged out successfully"}
