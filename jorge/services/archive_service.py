"""Service for reading the mod_logdb archive and the ejabberd spool."""

from __future__ import annotations

import re
from typing import Any, Dict, List

from pymongo import DESCENDING

from jorge import database


def count_saved_links(user_id: int) -> int:
    """Return how many conversation links the user saved."""
    db = database.get_database()
    return db[database.MY_LINKS].count_documents({"owner_id": user_id})


def count_queued_messages(token: str) -> int:
    """Return how many offline messages ejabberd holds for the user."""
    db = database.get_ejabberd_database()
    return db[database.SPOOL].count_documents({"username": token})


def get_saved_links(user_id: int) -> List[Dict[str, Any]]:
    """
    Get the user's saved links, newest first.

    Args:
        user_id: Numeric archive user id

    Returns:
        List of link documents with ``_id`` converted to a string
    """
    db = database.get_database()
    cursor = db[database.MY_LINKS].find({"owner_id": user_id}).sort("datat", DESCENDING)

    links = []
    for doc in cursor:
        doc["_id"] = str(doc["_id"])
        links.append(doc)
    return links


def get_contacts(token: str) -> List[Dict[str, Any]]:
    """Return roster entries for the user sorted by nickname, then JID."""
    db = database.get_ejabberd_database()
    contacts = [
        {"jid": doc["jid"], "nick": doc.get("nick") or doc["jid"]}
        for doc in db[database.ROSTER].find({"username": token})
    ]
    contacts.sort(key=lambda contact: (contact["nick"].lower(), contact["jid"]))
    return contacts


def search_messages(
    user_id: int,
    query: str,
    start: int = 0,
    limit: int = 20,
) -> Dict[str, Any]:
    """
    Search the user's archived messages.

    Matching is a case-insensitive substring match on the message body.

    Args:
        user_id: Numeric archive user id
        query: Text to look for; blank queries return no results
        start: Offset of the first result to return
        limit: Maximum number of results per page

    Returns:
        Dictionary with ``results`` for the requested page and ``total``
    """
    query = (query or "").strip()
    if not query:
        return {"results": [], "total": 0}

    db = database.get_database()
    collection = db[database.MESSAGES]
    selector = {
        "owner_id": user_id,
        "body": {"$regex": re.escape(query), "$options": "i"},
    }

    total = collection.count_documents(selector)
    cursor = (
        collection.find(selector)
        .sort("timestamp", DESCENDING)
        .skip(max(start, 0))
        .limit(limit)
    )

    results = []
    for doc in cursor:
        doc["_id"] = str(doc["_id"])
        results.append(doc)

    return {"results": results, "total": total}


def get_stats() -> Dict[str, int]:
    """Get archive-wide totals for the administrator view."""
    db = database.get_database()
    ejabberd_db = database.get_ejabberd_database()

    return {
        "total_users": ejabberd_db[database.USERS].count_documents({}),
        "archived_users": db[database.ARCHIVE_USERS].count_documents({}),
        "total_messages": db[database.MESSAGES].count_documents({}),
        "total_links": db[database.MY_LINKS].count_documents({}),
        "queued_messages": ejabberd_db[database.SPOOL].count_documents({}),
    }
