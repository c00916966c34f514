from flask import Blueprint, Response, request, jsonify

from eventhub.extensions import get_participant_repository, get_registration_service
from eventhub.participants.models import Participant
from eventhub.utils.serialization import ModelDecodeError
from eventhub.utils.validators import safe_object_id, get_json_object

participants_bp = Blueprint("participants", __name__)


def decode_participant_body():
    payload = get_json_object(request)
    if payload is None:
        return None
    try:
        return Participant.from_json(payload)
    except ModelDecodeError:
        return None


@participants_bp.route("", methods=["POST"])
def register_participant():
    """
    Register a participant and link them to the most recently created event.

    201 when a new participant is stored, 200 when an existing one
    (matched by email) is linked and refreshed.
    """
    participant = decode_participant_body()
    if participant is None:
        return jsonify({"error": "Invalid request"}), 400

    participant, created, error = get_registration_service().register(participant)
    if error:
        return jsonify({"error": error}), 404

    return jsonify(participant.to_json()), 201 if created else 200


@participants_bp.route("/<participant_id>", methods=["GET"])
def get_participant(participant_id):
    participant_oid = safe_object_id(participant_id)
    if not participant_oid:
        return jsonify({"error": "Invalid participant ID"}), 400

    participant = get_participant_repository().get(participant_oid)
    if not participant:
        return jsonify({"error": "Participant not found"}), 404

    return jsonify(participant.to_json())


@participants_bp.route("/<participant_id>", methods=["PUT"])
def update_participant(participant_id):
    participant_oid = safe_object_id(participant_id)
    if not participant_oid:
        return jsonify({"error": "Invalid participant ID"}), 400

    participant = decode_participant_body()
    if participant is None:
        return jsonify({"error": "Invalid request"}), 400

    updated = get_participant_repository().update(participant_oid, participant)
    if not updated:
        return jsonify({"error": "Participant not found"}), 404

    return jsonify(updated.to_json())


@participants_bp.route("/<participant_id>", methods=["DELETE"])
def delete_participant(participant_id):
    participant_oid = safe_object_id(participant_id)
    if not participant_oid:
        return jsonify({"error": "Invalid participant ID"}), 400

    if not get_participant_repository().delete(participant_oid):
        return jsonify({"error": "Participant not found"}), 404

    return Response(status=204, mimetype="application/json")
