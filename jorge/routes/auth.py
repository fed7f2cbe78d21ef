"""Login, logout and the "archiving not enabled" notice."""

from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, request, session, url_for

from jorge.services import user_service
from jorge.utils.auth import IDENTITY_ERROR_MESSAGE, require_page_context
from jorge.utils.i18n import is_supported_language

bp = Blueprint("auth", __name__)


@bp.route("/", methods=["GET", "POST"])
def login():
    """Show the login form and open a session for valid credentials."""
    host = current_app.config["XMPP_HOST"]
    language = request.values.get("language")
    if not is_supported_language(language):
        language = current_app.config["DEFAULT_LANGUAGE"]

    if request.method == "GET":
        if user_service.is_registered_session(session, host):
            return redirect(url_for("pages.main"))
        return render_template("login.html", language=language, error=False, username="")

    username = (request.form.get("username") or "").strip()
    password = request.form.get("password") or ""

    if not user_service.authenticate(username, password, host):
        current_app.logger.info(f"Failed login for {username!r}")
        return render_template("login.html", language=language, error=True, username=username), 401

    user_id = user_service.resolve_user_id(username, host)
    enabled = user_id is None or user_service.is_archive_enabled(user_id)

    session.clear()
    session["uid"] = username
    session["language"] = language
    session["enabled"] = "t" if enabled else "f"
    session["log_status"] = user_service.get_log_status(host)

    current_app.logger.info(f"User {username}@{host} logged in")
    return redirect(url_for("pages.main"))


@bp.get("/logout")
def logout():
    """Drop the session and go back to the login form."""
    session.clear()
    return redirect(url_for("auth.login"))


@bp.route("/not-enabled", methods=["GET", "POST"])
def not_enabled():
    """Tell the user archiving is off and let them switch it back on."""
    ctx, error_response = require_page_context(None)
    if error_response is not None:
        return error_response

    if request.method == "POST":
        user_id = user_service.resolve_user_id(ctx.token, ctx.host)
        if user_id is None:
            return IDENTITY_ERROR_MESSAGE, 500
        user_service.set_archive_enabled(user_id, True)
        session["enabled"] = "t"
        return redirect(url_for("pages.main"))

    return render_template("not_enabled.html")
