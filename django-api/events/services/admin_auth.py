"""Admin console login.

The console is gated by a single boolean flag in the client session, set
when the submitted username and password match the configured pair. There
is no user model, no token and no expiry. The credential pair is a
configuration value, so this only keeps casual visitors out; anything
exposed beyond a trusted network needs real authentication.
"""

import hmac
import logging

from django.conf import settings
from django.contrib.sessions.backends.base import SessionBase

from events.domain.errors import InvalidCredentialsError

logger = logging.getLogger(__name__)

SESSION_FLAG = "admin_auth"


def check_credentials(username: str, password: str) -> None:
    """Raise InvalidCredentialsError unless the pair matches the configured one."""
    expected = settings.ADMIN_CONSOLE
    user_ok = hmac.compare_digest(username.encode(), expected["USERNAME"].encode())
    password_ok = hmac.compare_digest(password.encode(), expected["PASSWORD"].encode())
    if not (user_ok and password_ok):
        logger.warning("Admin console login failed for %r", username)
        raise InvalidCredentialsError()


def login(session: SessionBase, username: str, password: str) -> None:
    check_credentials(username, password)
    session[SESSION_FLAG] = True
    logger.info("Admin console login for %r", username)


def logout(session: SessionBase) -> None:
    session.pop(SESSION_FLAG, None)


def is_admin(session: SessionBase) -> bool:
    return session.get(SESSION_FLAG, False) is True
