"""Session gates and the per-request context they build."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional, Tuple

from flask import current_app, redirect, request, session, url_for

from jorge.services import user_service
from jorge.utils.i18n import is_supported_language, toggle_language
from jorge.utils.navigation import MenuPage

IDENTITY_ERROR_MESSAGE = "Ooops...error(0.1)"

# Endpoints that run only the session and language gates. Login and logout
# never call the gates.
NOTICE_ENDPOINTS = frozenset({"auth.not_enabled"})


@dataclass
class RequestContext:
    """Everything a page needs about the current user and request."""

    session: MutableMapping[str, Any]
    token: str
    host: str
    language: str
    admin_name: str
    page: Optional[MenuPage] = None
    user_id: Optional[int] = None
    search_filter: str = ""
    start: int = 0
    link: str = ""

    @property
    def is_admin(self) -> bool:
        return self.token == self.admin_name

    @property
    def display_host(self) -> str:
        return self.host.replace("_", ".")


def _request_offset() -> int:
    raw = request.args.get("start", "")
    return int(raw) if raw.isascii() and raw.isdigit() else 0


def apply_language_switch(session_data: MutableMapping[str, Any], args) -> None:
    """Flip the session language when the request carries ``sw_lang=t``."""
    if args.get("sw_lang") != "t":
        return
    current = session_data.get("language")
    if is_supported_language(current):
        session_data["language"] = toggle_language(current)


def require_registered_session() -> Optional[Any]:
    """Return a logout redirect unless the session belongs to a registered user."""
    host = current_app.config["XMPP_HOST"]
    if not user_service.is_registered_session(session, host):
        current_app.logger.info(f"Unregistered session on {request.path}, logging out")
        return redirect(url_for("auth.logout"))
    return None


def require_language(session_data: MutableMapping[str, Any]) -> Optional[Any]:
    """Return a logout redirect when the session language is not supported."""
    if not is_supported_language(session_data.get("language")):
        current_app.logger.info(f"Unsupported language {session_data.get('language')!r} in session")
        return redirect(url_for("auth.logout"))
    return None


def require_archive_enabled(session_data: MutableMapping[str, Any]) -> Optional[Any]:
    """Return a redirect to the notice page when archiving is off for the user."""
    if session_data.get("enabled") == "f":
        return redirect(url_for("auth.not_enabled"))
    return None


def require_page_context(page: Optional[MenuPage]) -> Tuple[Optional[RequestContext], Optional[Any]]:
    """
    Run the gates for a page and build its context.

    Gates run in order: registered session, language switch and check,
    archive enabled, identity resolution. The first failing gate wins and
    its response is returned instead of a context. Endpoints listed in
    ``NOTICE_ENDPOINTS`` stop after the language gate.

    Returns:
        ``(context, None)`` on success, ``(None, error_response)`` otherwise
    """
    error_response = require_registered_session()
    if error_response is not None:
        return None, error_response

    apply_language_switch(session, request.args)
    error_response = require_language(session)
    if error_response is not None:
        return None, error_response

    notice_page = request.endpoint in NOTICE_ENDPOINTS
    if not notice_page:
        error_response = require_archive_enabled(session)
        if error_response is not None:
            return None, error_response

    config = current_app.config
    ctx = RequestContext(
        session=session,
        token=session.get("uid", ""),
        host=config["XMPP_HOST"],
        language=session["language"],
        admin_name=config["ADMIN_NAME"],
        page=page,
        search_filter=(request.values.get("query") or "").strip(),
        start=_request_offset(),
        link=request.args.get("a", ""),
    )

    if not notice_page:
        ctx.user_id = user_service.resolve_user_id(ctx.token, ctx.host)
        if ctx.user_id is None:
            current_app.logger.error(f"No numeric archive id for {ctx.token}@{ctx.host}")
            return None, (IDENTITY_ERROR_MESSAGE, 500)

    return ctx, None
