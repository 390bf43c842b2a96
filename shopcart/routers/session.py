"""Session Router - log shoppers in and out."""
from typing import Optional

from fastapi import APIRouter, Depends, Response

from shopcart.auth import SessionStore, get_session_store, get_session_token
from shopcart.cart import CartManager, get_cart_manager
from shopcart.config import SESSION_COOKIE_NAME
from shopcart.errors import Unauthenticated, ERROR_INVALID_SESSION, MESSAGE_LOGGED_OUT
from shopcart.logging import get_logger, sanitize_id_for_logging
from .models import LoginRequest

logger = get_logger(__name__)

router = APIRouter(tags=["session"])


@router.post("/session")
async def login(
    request: LoginRequest,
    response: Response,
    sessions: SessionStore = Depends(get_session_store),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Open a session and return its token (also set as a cookie).

    Logins also sweep carts left behind by sessions that expired.
    """
    cart_manager.purge_expired_sessions()
    token = sessions.create_web_session(request.username)
    session = sessions.verify_web_session_token(token)
    response.set_cookie(SESSION_COOKIE_NAME, token, httponly=True, samesite="lax")
    logger.info(f"Session {sanitize_id_for_logging(token)} opened")
    return {
        "token": token,
        "username": session["username"],
        "expiresAt": session["expires_at"],
    }


@router.delete("/session")
async def logout(
    response: Response,
    session_token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """End the session; its cart is dropped."""
    if not sessions.is_valid(session_token):
        raise Unauthenticated(ERROR_INVALID_SESSION)

    sessions.revoke_web_session(session_token)
    await cart_manager.end_session(session_token)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"message": MESSAGE_LOGGED_OUT}
