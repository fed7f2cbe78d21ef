"""MongoDB configuration and connection management.

Jorge reads from two databases on the same server: ejabberd's own
database (accounts, offline spool, rosters) and the mod_logdb archive.
"""

from __future__ import annotations

import os
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

# ejabberd collections
USERS = "users"
SPOOL = "spool"
ROSTER = "rosterusers"

# mod_logdb archive collections
ARCHIVE_USERS = "jorge_users"
ARCHIVE_STATUS = "jorge_status"
MY_LINKS = "jorge_mylinks"
MESSAGES = "messages"


# Global MongoDB client instance
_client: Optional[MongoClient] = None
_database: Optional[Database] = None
_ejabberd_database: Optional[Database] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client instance."""
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGODB_URI", "mongodb://localhost:27017/")
        _client = MongoClient(mongo_uri)
    return _client


def get_database() -> Database:
    """Get the mod_logdb archive database."""
    global _database
    if _database is None:
        client = get_mongo_client()
        db_name = os.getenv("MONGODB_DATABASE", "mod_logdb")
        _database = client[db_name]
    return _database


def get_ejabberd_database() -> Database:
    """Get the ejabberd server database."""
    global _ejabberd_database
    if _ejabberd_database is None:
        client = get_mongo_client()
        db_name = os.getenv("EJABBERD_DATABASE", "ejabberd")
        _ejabberd_database = client[db_name]
    return _ejabberd_database
