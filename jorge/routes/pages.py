"""Archive pages rendered below the navigation bar."""

from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, request, session, url_for

from jorge.services import archive_service, user_service
from jorge.utils.auth import RequestContext, require_page_context
from jorge.utils.navigation import MenuPage, fetch_counts, render_navigation

bp = Blueprint("pages", __name__)


def render_page(template: str, ctx: RequestContext, counts=None, **context):
    """Render a page template with the navigation fragment on top."""
    navigation = render_navigation(ctx, counts)
    return render_template(template, ctx=ctx, navigation=navigation, **context)


@bp.get("/main")
def main():
    ctx, error_response = require_page_context(MenuPage.MAIN)
    if error_response is not None:
        return error_response

    counts = fetch_counts(ctx)
    return render_page("pages/main.html", ctx, counts=counts, **counts)


@bp.route("/search", methods=["GET", "POST"])
def search():
    """Search archived messages. The query comes from the form or the query string."""
    ctx, error_response = require_page_context(MenuPage.SEARCH)
    if error_response is not None:
        return error_response

    page_size = current_app.config["SEARCH_PAGE_SIZE"]
    found = archive_service.search_messages(ctx.user_id, ctx.search_filter, ctx.start, page_size)

    prev_start = max(ctx.start - page_size, 0) if ctx.start > 0 else None
    next_start = ctx.start + page_size if ctx.start + page_size < found["total"] else None

    return render_page(
        "pages/search.html",
        ctx,
        results=found["results"],
        total=found["total"],
        prev_start=prev_start,
        next_start=next_start,
    )


@bp.get("/my-links")
def my_links():
    ctx, error_response = require_page_context(MenuPage.MY_LINKS)
    if error_response is not None:
        return error_response

    return render_page("pages/my_links.html", ctx, links=archive_service.get_saved_links(ctx.user_id))


@bp.route("/settings", methods=["GET", "POST"])
def settings():
    """Show archiving status; POST switches archiving off for the user."""
    ctx, error_response = require_page_context(MenuPage.SETTINGS)
    if error_response is not None:
        return error_response

    if request.method == "POST":
        user_service.set_archive_enabled(ctx.user_id, False)
        session["enabled"] = "f"
        current_app.logger.info(f"Archiving disabled by {ctx.token}")
        return redirect(url_for("auth.not_enabled"))

    return render_page("pages/settings.html", ctx)


@bp.get("/contacts")
def contacts():
    ctx, error_response = require_page_context(MenuPage.CONTACTS)
    if error_response is not None:
        return error_response

    return render_page("pages/contacts.html", ctx, contacts=archive_service.get_contacts(ctx.token))


@bp.get("/stats")
def stats():
    """Archive totals, for the administrator only."""
    ctx, error_response = require_page_context(MenuPage.STATS)
    if error_response is not None:
        return error_response

    if not ctx.is_admin:
        return redirect(url_for("pages.main"))

    return render_page("pages/stats.html", ctx, stats=archive_service.get_stats())


@bp.get("/help", endpoint="help")
def help_page():
    ctx, error_response = require_page_context(MenuPage.HELP)
    if error_response is not None:
        return error_response

    return render_page("pages/help.html", ctx)
