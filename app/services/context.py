"""
Request context — who is acting. Passed explicitly into every workflow call.
"""
from dataclasses import dataclass

from app.config import DEFAULT_USER_ID


@dataclass(frozen=True)
class RequestContext:
    user_id: str = DEFAULT_USER_ID


def context_from_session(session) -> RequestContext:
    """Build a context from the Flask session, falling back to the default user."""
    return RequestContext(user_id=session.get('user_id') or DEFAULT_USER_ID)
