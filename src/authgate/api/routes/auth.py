"""Login, auth check and logout endpoints."""

import logging
import secrets

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from authgate.api.dependencies import ConfigDep, SessionStoreDep
from authgate.api.pages import INVALID_CREDENTIALS_PAGE, LOGIN_PAGE
from authgate.config import GatewayConfig

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _credentials_match(config: GatewayConfig, username: str, password: str) -> bool:
    # Evaluate both comparisons so timing does not reveal which one failed
    username_ok = secrets.compare_digest(username.encode(), config.credentials.username.encode())
    password_ok = secrets.compare_digest(password.encode(), config.credentials.password.encode())
    return username_ok and password_ok


@router.get("/login", response_class=HTMLResponse)
def login_page() -> HTMLResponse:
    """Render the login form."""
    return HTMLResponse(LOGIN_PAGE)


@router.post("/login", response_model=None)
def login(
    store: SessionStoreDep,
    config: ConfigDep,
    username: str = Form(default=""),
    password: str = Form(default=""),
) -> RedirectResponse | HTMLResponse:
    """Check credentials and issue a session cookie on success."""
    if not _credentials_match(config, username, password):
        logger.warning("Rejected login attempt")
        return HTMLResponse(INVALID_CREDENTIALS_PAGE, status_code=status.HTTP_401_UNAUTHORIZED)

    session_id = store.issue()
    response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=config.session.cookie_name,
        value=session_id,
        max_age=store.ttl_seconds,
        path="/",
        secure=config.session.cookie_secure,
        httponly=True,
    )
    return response


@router.get("/auth", response_class=PlainTextResponse)
def check_auth(request: Request, store: SessionStoreDep, config: ConfigDep) -> PlainTextResponse:
    """Report whether the request carries a live session cookie."""
    session_id = request.cookies.get(config.session.cookie_name)
    if store.verify(session_id):
        return PlainTextResponse("Authorized")
    return PlainTextResponse("Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED)


@router.api_route("/logout", methods=["GET", "POST"])
def logout(request: Request, store: SessionStoreDep, config: ConfigDep) -> RedirectResponse:
    """Revoke the session and expire the cookie."""
    session_id = request.cookies.get(config.session.cookie_name)
    if session_id is not None:
        store.revoke(session_id)

    response = RedirectResponse(url="/login", status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=config.session.cookie_name,
        value="",
        max_age=0,
        path="/",
        secure=config.session.cookie_secure,
        httponly=True,
    )
    return response
