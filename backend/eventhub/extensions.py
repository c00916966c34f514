import logging
import sys

from flask import current_app
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def init_mongo(app, client=None):
    """Attach a MongoDB client and database to ``app.extensions``.

    A client passed in (tests hand over an in-memory one) is used as is.
    Otherwise a client is built from ``MONGO_URI`` and pinged; a server
    that cannot be reached terminates the process.
    """
    if client is None:
        mongo_uri = app.config["MONGO_URI"]
        client = MongoClient(
            mongo_uri,
            serverSelectionTimeoutMS=app.config["MONGO_SERVER_SELECTION_TIMEOUT_MS"],
        )
        try:
            client.admin.command("ping")
        except PyMongoError as e:
            logger.critical("[MongoDB] Could not connect to %s: %s", mongo_uri, e)
            sys.exit(1)

    db = client[app.config["MONGO_DB_NAME"]]
    app.extensions["mongo_client"] = client
    app.extensions["mongo_db"] = db

    logger.info("[MongoDB] Connected to database: %s", db.name)
    return db


def close_mongo(app):
    client = app.extensions.pop("mongo_client", None)
    app.extensions.pop("mongo_db", None)
    if client is not None:
        client.close()
        logger.info("[MongoDB] Connection closed.")


def get_event_repository():
    return current_app.extensions["event_repository"]


def get_participant_repository():
    return current_app.extensions["participant_repository"]


def get_registration_service():
    return current_app.extensions["registration_service"]
