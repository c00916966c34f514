import logging

from flask import Flask, jsonify
from flask_cors import CORS
from pymongo.errors import PyMongoError

from eventhub.config import Config
from eventhub.extensions import init_mongo
from eventhub.utils.logging import setup_logging
from eventhub.utils.serialization import ModelDecodeError

logger = logging.getLogger(__name__)


def create_app(config_class=Config, mongo_client=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app.config["LOG_LEVEL"])

    # Disable strict slashes to prevent 308 redirects that break CORS preflight
    app.url_map.strict_slashes = False

    # Reads the CORS_* keys from app.config
    CORS(app)

    db = init_mongo(app, mongo_client)

    from eventhub.events.repository import EventRepository
    from eventhub.participants.repository import ParticipantRepository
    from eventhub.core import RegistrationService

    events = EventRepository(db[app.config["EVENTS_COLLECTION"]])
    participants = ParticipantRepository(db[app.config["PARTICIPANTS_COLLECTION"]])
    app.extensions["event_repository"] = events
    app.extensions["participant_repository"] = participants
    app.extensions["registration_service"] = RegistrationService(events, participants)

    # Register blueprints
    from eventhub.events.routes import events_bp
    from eventhub.participants.routes import participants_bp

    app.register_blueprint(events_bp, url_prefix='/events')
    app.register_blueprint(participants_bp, url_prefix='/participants')

    register_error_handlers(app)

    return app


def register_error_handlers(app):
    # Store failures surface with the driver's message, unredacted
    @app.errorhandler(PyMongoError)
    def handle_store_error(e):
        logger.error("[MongoDB] %s", e)
        return jsonify({"error": str(e)}), 500

    # A stored document that no longer matches the model
    @app.errorhandler(ModelDecodeError)
    def handle_decode_error(e):
        logger.error("[MongoDB] Could not decode document: %s", e)
        return jsonify({"error": str(e)}), 500
