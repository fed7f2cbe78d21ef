"""Polish and English interface labels."""

from __future__ import annotations

from typing import Dict

SUPPORTED_LANGUAGES = ("pol", "eng")

LABELS: Dict[str, Dict[str, str]] = {
    # navigation
    "menu_main": {"pol": "Strona główna", "eng": "Main page"},
    "menu_search": {"pol": "Wyszukiwanie", "eng": "Search"},
    "menu_my_links": {"pol": "Moje linki", "eng": "My links"},
    "menu_settings": {"pol": "Ustawienia", "eng": "Settings"},
    "menu_contacts": {"pol": "Kontakty", "eng": "Contacts"},
    "menu_stats": {"pol": "Stats", "eng": "Stats"},
    "status_paused": {
        "pol": "Archiwizacja jest obecnie wstrzymana",
        "eng": "Message archiving is currently paused",
    },
    "change_language": {"pol": "Zmień język na:", "eng": "Change language to:"},
    "language_switch": {"pol": "English", "eng": "Polski"},
    "help": {"pol": "Pomoc", "eng": "Help"},
    "logout": {"pol": "Wyloguj", "eng": "Log out"},
    "search_button": {"pol": "Szukaj", "eng": "Search"},
    # login and notices
    "login_title": {"pol": "Logowanie", "eng": "Log in"},
    "login_username": {"pol": "Użytkownik", "eng": "Username"},
    "login_password": {"pol": "Hasło", "eng": "Password"},
    "login_button": {"pol": "Zaloguj", "eng": "Log in"},
    "login_failed": {"pol": "Nieprawidłowy login lub hasło", "eng": "Invalid username or password"},
    "not_enabled": {
        "pol": "Archiwizacja wiadomości nie jest włączona dla Twojego konta.",
        "eng": "Message archiving is not enabled for your account.",
    },
    # page bodies
    "main_welcome": {"pol": "Witaj w archiwum wiadomości", "eng": "Welcome to your message archive"},
    "offline_messages": {"pol": "Wiadomości offline w kolejce", "eng": "Queued offline messages"},
    "search_results": {"pol": "Wyniki wyszukiwania", "eng": "Search results"},
    "search_none": {"pol": "Brak wyników", "eng": "No results"},
    "search_prev": {"pol": "Poprzednie", "eng": "Previous"},
    "search_next": {"pol": "Następne", "eng": "Next"},
    "my_links_empty": {"pol": "Nie masz zapisanych linków", "eng": "You have no saved links"},
    "contacts_empty": {"pol": "Brak kontaktów", "eng": "No contacts"},
    "settings_archiving": {"pol": "Archiwizacja wiadomości", "eng": "Message archiving"},
    "settings_enabled": {"pol": "włączona", "eng": "enabled"},
    "settings_disabled": {"pol": "wyłączona", "eng": "disabled"},
    "settings_disable": {"pol": "Wyłącz archiwizację", "eng": "Disable archiving"},
    "settings_enable": {"pol": "Włącz archiwizację", "eng": "Enable archiving"},
    "stats_total_users": {"pol": "Konta na serwerze", "eng": "Server accounts"},
    "stats_archived_users": {"pol": "Użytkownicy w archiwum", "eng": "Archived users"},
    "stats_total_messages": {"pol": "Zarchiwizowane wiadomości", "eng": "Archived messages"},
    "stats_total_links": {"pol": "Zapisane linki", "eng": "Saved links"},
    "stats_queued_messages": {"pol": "Wiadomości offline", "eng": "Offline messages"},
    "help_text": {
        "pol": "Jorge pozwala przeglądać i przeszukiwać archiwum Twoich rozmów.",
        "eng": "Jorge lets you browse and search the archive of your conversations.",
    },
}


def is_supported_language(language) -> bool:
    return language in SUPPORTED_LANGUAGES


def label(key: str, language: str) -> str:
    """Look up an interface string. Unknown keys raise KeyError."""
    return LABELS[key][language]


def toggle_language(language: str) -> str:
    """Return the other supported language; unsupported values come back unchanged."""
    if language == "pol":
        return "eng"
    if language == "eng":
        return "pol"
    return language
