"""
Registration Service - links participants to the newest event.

Responsibilities:
- Require at least one event before anyone can register
- Reuse the participant already registered under the same email
- Append the newest event to the participant's list, never twice
- Refresh company / profile picture when the new submission carries them

The steps are separate store round-trips with no transaction: two
concurrent registrations of a new email can both insert, and an event
deleted mid-flight can be left referenced.
"""
import logging
from typing import Optional, Tuple

from eventhub.participants.models import Participant

logger = logging.getLogger(__name__)

NO_EVENT_ERROR = "No event found to link the participant to. Create an event first."


class RegistrationService:
    """Create-or-link flow for incoming participants."""

    def __init__(self, events, participants):
        self.events = events
        self.participants = participants

    def register(self, participant: Participant) -> Tuple[Optional[Participant], bool, Optional[str]]:
        """
        Register a participant against the most recently created event.

        Args:
            participant: Decoded submission (its event list is ignored)

        Returns:
            Tuple of (participant, created, error_message)
        """
        latest_event = self.events.latest()
        if latest_event is None:
            return None, False, NO_EVENT_ERROR

        existing = self.participants.find_by_email(participant.email)

        if existing is not None:
            linked = self.participants.link_event(
                existing.id,
                latest_event.id,
                participant.optional_fields()
            )
            if linked is not None:
                logger.info(
                    "[Registration] Linked participant %s to event %s",
                    linked.id, latest_event.id
                )
                return linked, False, None
            # Deleted between lookup and update: fall through and register anew

        participant.eventos_participados = [latest_event.id]
        created = self.participants.create(participant)
        logger.info(
            "[Registration] Created participant %s for event %s",
            created.id, latest_event.id
        )
        return created, True, None
