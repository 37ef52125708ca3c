from fastapi import Cookie, HTTPException


async def require_session_token(token: str | None = Cookie(default=None)) -> str:
    """Read the backend bearer token from the session cookie.

    Args:
        token (str | None): The value of the "token" cookie.

    Returns:
        str: The token, forwarded unchanged to the backend.

    Raises:
        HTTPException: 401 if the cookie is missing or empty.
    """
    if not token:
        raise HTTPException(status_code=401, detail="Authentication required")
    return token
