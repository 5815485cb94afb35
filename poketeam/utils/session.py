import secrets
from fastapi import Request, Response
from poketeam.config import USER_COOKIE_NAME
from poketeam.utils.logger import log_debug


def get_user_id(request: Request, response: Response) -> str:
    """
    Resolve the current user from the session cookie.

    Anonymous visitors get a fresh random id, sent back as an httponly cookie
    so their team survives across requests.
    """
    user_id = request.cookies.get(USER_COOKIE_NAME)
    if not user_id:
        user_id = secrets.token_hex(16)
        response.set_cookie(USER_COOKIE_NAME, user_id, httponly=True, samesite="lax")
        log_debug("Issued new user id", {"user_id": user_id})
    return user_id
