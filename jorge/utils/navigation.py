"""Navigation bar shown above every archive page."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

from flask import render_template, request, url_for
from markupsafe import Markup

from jorge.services import archive_service
from jorge.utils.i18n import label

if TYPE_CHECKING:
    from jorge.utils.auth import RequestContext


class MenuPage(str, Enum):
    SEARCH = "search"
    MAIN = "main"
    MY_LINKS = "my_links"
    SETTINGS = "settings"
    HELP = "help"
    CONTACTS = "contacts"
    STATS = "stats"


@dataclass(frozen=True)
class MenuEntry:
    page: MenuPage
    label: str
    endpoint: str
    active: bool


# Display order of the menu row.
MENU_LAYOUT = (
    (MenuPage.MAIN, "menu_main", "pages.main"),
    (MenuPage.SEARCH, "menu_search", "pages.search"),
    (MenuPage.MY_LINKS, "menu_my_links", "pages.my_links"),
    (MenuPage.CONTACTS, "menu_contacts", "pages.contacts"),
    (MenuPage.SETTINGS, "menu_settings", "pages.settings"),
    (MenuPage.STATS, "menu_stats", "pages.stats"),
)


def build_menu(language: str, page: MenuPage, saved_links: int, is_admin: bool) -> List[MenuEntry]:
    """
    Build the menu row for a page.

    The entry for ``page`` is marked active. Help has no entry of its own,
    so nothing is active there. Stats is listed for the administrator only.
    """
    entries = []
    for entry_page, key, endpoint in MENU_LAYOUT:
        if entry_page is MenuPage.STATS and not is_admin:
            continue

        text = label(key, language)
        if entry_page is MenuPage.MY_LINKS:
            text = f"{text} ({saved_links})"

        entries.append(MenuEntry(entry_page, text, endpoint, entry_page is page))
    return entries


def language_switch_url(ctx: RequestContext) -> str:
    """Link back to the current page with the language flipped, keeping filter and offset."""
    params = {"sw_lang": "t"}
    if ctx.link:
        params["a"] = ctx.link
    if ctx.search_filter:
        params["query"] = ctx.search_filter
    if ctx.start:
        params["start"] = ctx.start
    return url_for(request.endpoint, **params)


def fetch_counts(ctx: RequestContext) -> Dict[str, int]:
    """Fetch the saved-link and offline-message counts shown in the navigation bar."""
    return {
        "saved_links": archive_service.count_saved_links(ctx.user_id),
        "queued_messages": archive_service.count_queued_messages(ctx.token),
    }


def render_navigation(ctx: RequestContext, counts: Optional[Dict[str, int]] = None) -> Markup:
    """Render the navigation fragment for the page in ``ctx``.

    Pass ``counts`` from ``fetch_counts`` when the page body shows them too.
    """
    if counts is None:
        counts = fetch_counts(ctx)

    html = render_template(
        "_navigation.html",
        ctx=ctx,
        menu=build_menu(ctx.language, ctx.page, counts["saved_links"], ctx.is_admin),
        queued_messages=counts["queued_messages"],
        archiving_paused=ctx.session.get("log_status") == "0",
        switch_url=language_switch_url(ctx),
    )
    return Markup(html)
