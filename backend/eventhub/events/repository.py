"""
Event Repository - CRUD over the events collection.

Every read goes to the store; nothing is cached.
"""
import logging
from typing import List, Optional

from bson import ObjectId
from pymongo import DESCENDING

from eventhub.events.models import Event
from eventhub.utils.serialization import ModelDecodeError

logger = logging.getLogger(__name__)


class EventRepository:
    """Database operations for events."""

    def __init__(self, collection):
        self.collection = collection

    def list_all(self) -> List[Event]:
        """All events in store order. Documents that fail to decode are skipped."""
        events = []
        for doc in self.collection.find({}):
            try:
                events.append(Event.from_document(doc))
            except ModelDecodeError as e:
                logger.warning("[Events] Skipping undecodable event %s: %s", doc.get("_id"), e)
        return events

    def get(self, event_id: ObjectId) -> Optional[Event]:
        doc = self.collection.find_one({"_id": event_id})
        if not doc:
            return None
        return Event.from_document(doc)

    def create(self, event: Event) -> Event:
        """Insert a new event; the store assigns its id."""
        result = self.collection.insert_one(event.mutable_fields())
        event.id = result.inserted_id
        return event

    def update(self, event_id: ObjectId, event: Event) -> Optional[Event]:
        """
        Replace all mutable fields of an event.

        Returns:
            The event as re-read from the store, or None if no event matched
        """
        result = self.collection.update_one(
            {"_id": event_id},
            {"$set": event.mutable_fields()}
        )
        if result.matched_count == 0:
            return None
        return self.get(event_id)

    def delete(self, event_id: ObjectId) -> bool:
        result = self.collection.delete_one({"_id": event_id})
        return result.deleted_count > 0

    def latest(self) -> Optional[Event]:
        """
        Most recently created event.

        ObjectIds start with their creation timestamp, so the greatest
        ``_id`` approximates the newest insert.
        """
        doc = self.collection.find_one({}, sort=[("_id", DESCENDING)])
        if not doc:
            return None
        return Event.from_document(doc)
