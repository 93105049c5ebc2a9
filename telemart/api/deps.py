# telemart/api/deps.py
from functools import lru_cache

from fastapi import Depends, Request

from telemart.domain.errors import Unauthenticated
from telemart.services.mail_service import Mailer, build_mailer
from telemart.services.session_service import SessionStore, build_session_store
from telemart.utils.security import unsign_token
from telemart.utils.settings import SESSION_COOKIE_NAME


@lru_cache
def get_session_store() -> SessionStore:
    return build_session_store()


@lru_cache
def get_mailer() -> Mailer:
    return build_mailer()


def session_token(request: Request) -> str | None:
    """Token z podpisanego cookie, None gdy brak lub podrobiony."""
    return unsign_token(request.cookies.get(SESSION_COOKIE_NAME))


def require_user(
    token: str | None = Depends(session_token),
    store: SessionStore = Depends(get_session_store),
) -> int:
    """
    Bramka autoryzacji: przepuszcza tylko z waznym userId w sesji.
    """
    if not token:
        raise Unauthenticated()

    data = store.get(token)
    user_id = data.get("userId") if data else None
    if not user_id:
        raise Unauthenticated()

    return user_id
