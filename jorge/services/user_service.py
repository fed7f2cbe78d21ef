"""Service for looking up ejabberd accounts and archive identities."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from werkzeug.security import check_password_hash

from jorge import database


def get_account(username: str, host: str) -> Optional[Dict[str, Any]]:
    """
    Fetch an ejabberd account.

    Args:
        username: Login token (the local part of the JID)
        host: XMPP host in archive form (underscores instead of dots)

    Returns:
        The account document, or None if the user does not exist
    """
    db = database.get_ejabberd_database()
    return db[database.USERS].find_one({"username": username, "host": host})


def authenticate(username: str, password: str, host: str) -> bool:
    """Return True when the credentials match an ejabberd account."""
    if not username or not password:
        return False

    account = get_account(username, host)
    if not account or not account.get("password"):
        return False

    return check_password_hash(account["password"], password)


def is_registered_session(session: Mapping[str, Any], host: str) -> bool:
    """
    Check that the session belongs to a registered user.

    Args:
        session: Session data holding the login token under ``uid``
        host: XMPP host the frontend serves

    Returns:
        True if the session carries a token and the account still exists
    """
    token = session.get("uid")
    if not token:
        return False
    return get_account(token, host) is not None


def resolve_user_id(token: str, host: str) -> Optional[int]:
    """
    Map a login token to the numeric archive user id.

    Returns None when the archive has no record or the stored id is not a
    plain non-negative ASCII integer.
    """
    db = database.get_database()
    record = db[database.ARCHIVE_USERS].find_one({"username": token, "host": host})
    if not record:
        return None

    raw_id = str(record.get("user_id", ""))
    if not (raw_id.isascii() and raw_id.isdigit()):
        return None
    return int(raw_id)


def is_archive_enabled(user_id: int) -> bool:
    """Return False only when archiving was explicitly switched off for the user."""
    db = database.get_database()
    record = db[database.ARCHIVE_USERS].find_one({"user_id": user_id}, {"enabled": 1})
    if not record:
        return True
    return record.get("enabled", True) is not False


def set_archive_enabled(user_id: int, enabled: bool) -> bool:
    """Persist the per-user archiving flag. Returns True if a record changed."""
    db = database.get_database()
    result = db[database.ARCHIVE_USERS].update_one(
        {"user_id": user_id},
        {"$set": {"enabled": enabled}},
    )
    return result.modified_count > 0


def get_log_status(host: str) -> str:
    """Return ``"1"`` while mod_logdb is archiving for the host, ``"0"`` when paused."""
    db = database.get_database()
    record = db[database.ARCHIVE_STATUS].find_one({"host": host})
    if not record:
        return "1"
    return "1" if record.get("log_status", True) else "0"
