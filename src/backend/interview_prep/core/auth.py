import re

from fastapi import Header, HTTPException, status
from pydantic import BaseModel

# Default demo user -- used when no X-User-Id header is sent
DEMO_USER_ID = "demo-user"

# User ids end up inside storage keys, so ":" and whitespace are not allowed
_USER_ID_RE = re.compile(r"^[A-Za-z0-9_.@-]{1,200}$")


class UserContext(BaseModel):
    user_id: str


def get_user(x_user_id: str | None = Header(default=None)) -> UserContext:
    """Identify the caller from the X-User-Id header, or fall back to the demo user.

    There is no authentication; the header is trusted as-is.
    """
    if x_user_id is None:
        return UserContext(user_id=DEMO_USER_ID)

    if not _USER_ID_RE.match(x_user_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid X-User-Id header",
        )
    return UserContext(user_id=x_user_id)
