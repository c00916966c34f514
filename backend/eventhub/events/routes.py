from flask import Blueprint, Response, request, jsonify

from eventhub.events.models import Event
from eventhub.extensions import get_event_repository, get_participant_repository
from eventhub.utils.serialization import ModelDecodeError
from eventhub.utils.validators import safe_object_id, get_json_object

events_bp = Blueprint("events", __name__)


# ------------------ HELPERS ------------------

def decode_event_body():
    payload = get_json_object(request)
    if payload is None:
        return None
    try:
        return Event.from_json(payload)
    except ModelDecodeError:
        return None


# ------------------ ROUTES ------------------

@events_bp.route("", methods=["GET"])
def list_events():
    events = get_event_repository().list_all()
    return jsonify([event.to_json() for event in events])


@events_bp.route("/<event_id>", methods=["GET"])
def get_event(event_id):
    event_oid = safe_object_id(event_id)
    if not event_oid:
        return jsonify({"error": "Invalid event ID"}), 400

    event = get_event_repository().get(event_oid)
    if not event:
        return jsonify({"error": "Event not found"}), 404

    return jsonify(event.to_json())


@events_bp.route("", methods=["POST"])
def create_event():
    event = decode_event_body()
    if event is None:
        return jsonify({"error": "Invalid request"}), 400

    event = get_event_repository().create(event)
    return jsonify(event.to_json()), 201


@events_bp.route("/<event_id>", methods=["PUT"])
def update_event(event_id):
    event_oid = safe_object_id(event_id)
    if not event_oid:
        return jsonify({"error": "Invalid event ID"}), 400

    event = decode_event_body()
    if event is None:
        return jsonify({"error": "Invalid request"}), 400

    updated = get_event_repository().update(event_oid, event)
    if not updated:
        return jsonify({"error": "Event not found"}), 404

    return jsonify(updated.to_json())


@events_bp.route("/<event_id>", methods=["DELETE"])
def delete_event(event_id):
    event_oid = safe_object_id(event_id)
    if not event_oid:
        return jsonify({"error": "Invalid event ID"}), 400

    if not get_event_repository().delete(event_oid):
        return jsonify({"error": "Event not found"}), 404

    return Response(status=204, mimetype="application/json")


@events_bp.route("/<event_id>/participants", methods=["GET"])
def list_event_participants(event_id):
    """
    Participants linked to an event.

    The event itself is not looked up: an unknown id yields an empty list.
    """
    event_oid = safe_object_id(event_id)
    if not event_oid:
        return jsonify({"error": "Invalid event ID"}), 400

    participants = get_participant_repository().list_by_event(event_oid)
    return jsonify([p.to_json() for p in participants])
