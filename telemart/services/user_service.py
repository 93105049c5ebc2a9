# telemart/services/user_service.py
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from telemart.data.models.user import UserModel
from telemart.domain.errors import Conflict, InvalidCredentials, InvalidInput
from telemart.domain.schemas import LoginIn, UserCreate
from telemart.repos.user_repo import UserRepo
from telemart.utils.logging import get_logger
from telemart.utils.security import hash_password, password_too_long, verify_password

logger = get_logger(__name__)


def _clean(value: str | None) -> str:
    return (value or "").strip()


def _public(user: UserModel) -> Dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "name": user.name,
        "email": user.email,
        "phone_number": user.phone_number,
    }


class UserService:
    """
    Rejestracja i logowanie. Hasla tylko jako hash bcrypt.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def register(self, payload: UserCreate) -> Dict[str, Any]:
        username = _clean(payload.username)
        password = _clean(payload.password)
        name = _clean(payload.name)
        email = _clean(payload.email)
        phone_number = _clean(payload.phone_number)

        if not all((username, password, name, email, phone_number)):
            raise InvalidInput("All fields are required")

        if password_too_long(password):
            raise InvalidInput("Password must be at most 72 bytes")

        self._ensure_unique(username, email, phone_number)

        user = UserModel(
            username=username,
            password=hash_password(password),
            name=name,
            email=email,
            phone_number=phone_number,
        )

        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            # ktos zarejestrowal to samo miedzy sprawdzeniem a insertem
            self.repo.rollback()
            self._ensure_unique(username, email, phone_number)
            raise Conflict("User already exists")

        logger.info(f"Registered user {created.id} ({created.username})")
        return _public(created)

    def authenticate(self, payload: LoginIn) -> int:
        username = _clean(payload.username)
        password = _clean(payload.password)

        if not username or not password:
            raise InvalidInput("username and password required")

        user = self.repo.get_by_username(username)

        # ten sam blad dla nieznanego usera i zlego hasla
        if not verify_password(password, user.password if user else None):
            logger.info("Failed login attempt")
            raise InvalidCredentials()

        return user.id

    def _ensure_unique(self, username: str, email: str, phone_number: str):
        existing = self.repo.find_conflicting(username, email, phone_number)
        if not existing:
            return

        # priorytet: username -> email -> telefon
        if any(u.username == username for u in existing):
            raise Conflict("Username already exists")
        if any(u.email == email for u in existing):
            raise Conflict("Email already exists")
        raise Conflict("Phone number already exists")
