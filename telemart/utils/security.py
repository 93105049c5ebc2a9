# telemart/utils/security.py
import hashlib
import hmac
import secrets

import bcrypt

from telemart.utils.settings import SESSION_SECRET

# bcrypt bierze tylko pierwsze 72 bajty
MAX_PASSWORD_BYTES = 72

# hash do porownania gdy user nie istnieje, zeby czas odpowiedzi byl taki sam
_DUMMY_HASH = bcrypt.hashpw(b"telemart-dummy-password", bcrypt.gensalt()).decode()


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str | None) -> bool:
    """
    Constant-time bcrypt check. A missing hash still burns one bcrypt round
    against a dummy hash and returns False.
    """
    if password_too_long(password):
        return False
    if not password_hash:
        bcrypt.checkpw(password.encode("utf-8"), _DUMMY_HASH.encode())
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode())
    except ValueError:
        # zly format hasha w bazie
        return False


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


def _signature(token: str, secret: str) -> str:
    return hmac.new(secret.encode(), token.encode(), hashlib.sha256).hexdigest()


def sign_token(token: str, secret: str = SESSION_SECRET) -> str:
    return f"{token}.{_signature(token, secret)}"


def unsign_token(value: str | None, secret: str = SESSION_SECRET) -> str | None:
    """Returns the bare token, or None when the cookie is missing or tampered with."""
    if not value or "." not in value:
        return None
    token, _, signature = value.rpartition(".")
    if not token or not hmac.compare_digest(signature, _signature(token, secret)):
        return None
    return token
