"""
Participant Repository - CRUD over the participants collection.

The event list of a participant is only ever changed through
``link_event``; ``update`` leaves it untouched.
"""
import logging
from typing import Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from eventhub.participants.models import Participant
from eventhub.utils.serialization import ModelDecodeError

logger = logging.getLogger(__name__)


class ParticipantRepository:
    """Database operations for participants."""

    def __init__(self, collection):
        self.collection = collection

    def list_by_event(self, event_id: ObjectId) -> List[Participant]:
        """Participants whose event list contains ``event_id``. Undecodable documents are skipped."""
        participants = []
        for doc in self.collection.find({"eventos_participados": event_id}):
            try:
                participants.append(Participant.from_document(doc))
            except ModelDecodeError as e:
                logger.warning("[Participants] Skipping undecodable participant %s: %s", doc.get("_id"), e)
        return participants

    def get(self, participant_id: ObjectId) -> Optional[Participant]:
        doc = self.collection.find_one({"_id": participant_id})
        if not doc:
            return None
        return Participant.from_document(doc)

    def find_by_email(self, email: str) -> Optional[Participant]:
        doc = self.collection.find_one({"email": email})
        if not doc:
            return None
        return Participant.from_document(doc)

    def create(self, participant: Participant) -> Participant:
        doc = participant.to_document()
        doc.pop("_id", None)
        result = self.collection.insert_one(doc)
        participant.id = result.inserted_id
        return participant

    def update(self, participant_id: ObjectId, participant: Participant) -> Optional[Participant]:
        """
        Overwrite name, email, company and profile picture.

        Returns:
            The participant as re-read from the store, or None if none matched
        """
        result = self.collection.update_one(
            {"_id": participant_id},
            {"$set": {
                "nome": participant.nome,
                "email": participant.email,
                "profile_picture_base64": participant.profile_picture_base64,
                "empresa": participant.empresa,
            }}
        )
        if result.matched_count == 0:
            return None
        return self.get(participant_id)

    def delete(self, participant_id: ObjectId) -> bool:
        result = self.collection.delete_one({"_id": participant_id})
        return result.deleted_count > 0

    def link_event(
        self,
        participant_id: ObjectId,
        event_id: ObjectId,
        fields: Optional[Dict[str, str]] = None
    ) -> Optional[Participant]:
        """
        Append ``event_id`` to the participant's event list unless already present.

        Args:
            participant_id: Participant to link
            event_id: Event to append
            fields: Extra top-level fields to overwrite in the same write

        Returns:
            The updated participant, or None if it no longer exists
        """
        update = {"$addToSet": {"eventos_participados": event_id}}
        if fields:
            update["$set"] = dict(fields)

        doc = self.collection.find_one_and_update(
            {"_id": participant_id},
            update,
            return_document=ReturnDocument.AFTER
        )
        if not doc:
            return None
        return Participant.from_document(doc)
