"""FastAPI dependencies for the shopper's session token.

The token is only extracted here; validation happens in the cart service so
that every cart operation reports its own ``Unauthenticated`` message.
"""

from typing import Optional

from fastapi import Cookie, Header

from shopcart.config import SESSION_COOKIE_NAME


async def get_session_token(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    session_cookie: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
) -> Optional[str]:
    """
    Extract the session token from the request.

    Accepts either:
    - Authorization: Bearer <session_token> (API clients)
    - session=<session_token> cookie (browser)
    """
    if authorization:
        parts = authorization.split(" ")
        if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
            return parts[1]
    return session_cookie or None
