"""Decoding and serialization of the Event and Participant models"""
from datetime import datetime, timezone

import pytest
from bson import ObjectId

from eventhub.events.models import Event
from eventhub.participants.models import Participant
from eventhub.utils.serialization import ModelDecodeError, ZERO_TIME


def test_event_from_json_reads_all_fields():
    event = Event.from_json({
        "nome": "Launch",
        "descricao": "Product launch",
        "data": "2025-09-01T09:00:00Z",
        "endereco": "Rua A, 1",
        "background_color": "#000000",
        "text_color": "#ffffff",
    })

    assert event.nome == "Launch"
    assert event.data == datetime(2025, 9, 1, 9, 0, tzinfo=timezone.utc)
    assert event.background_color == "#000000"
    assert event.id is None


def test_event_from_json_accepts_empty_payload():
    event = Event.from_json({})

    assert event.nome == ""
    assert event.data == ZERO_TIME
    assert event.to_json()["data"] == "0001-01-01T00:00:00Z"


def test_event_from_json_ignores_client_id():
    event = Event.from_json({"id": str(ObjectId()), "nome": "x"})
    assert event.id is None


def test_event_offset_timestamp_is_normalised_to_utc():
    event = Event.from_json({"data": "2025-09-01T06:00:00-03:00"})
    assert event.to_json()["data"] == "2025-09-01T09:00:00Z"


@pytest.mark.parametrize("payload", [
    {"nome": 123},
    {"descricao": ["a"]},
    {"data": "yesterday"},
    {"data": 1700000000},
    {"data": "2025-09-01T09:00:00"},
])
def test_event_from_json_rejects_wrong_types(payload):
    with pytest.raises(ModelDecodeError):
        Event.from_json(payload)


def test_event_from_document_treats_naive_datetime_as_utc():
    oid = ObjectId()
    event = Event.from_document({"_id": oid, "nome": "x", "data": datetime(2025, 1, 2, 3, 4, 5)})

    assert event.id == oid
    assert event.to_json()["data"] == "2025-01-02T03:04:05Z"
    assert event.to_json()["id"] == str(oid)


def test_participant_json_omits_empty_optional_fields():
    participant = Participant(nome="Ana", email="ana@x.com", eventos_participados=[ObjectId()])
    payload = participant.to_json()

    assert "empresa" not in payload
    assert "profile_picture_base64" not in payload
    assert len(payload["eventos_participados"]) == 1
    assert isinstance(payload["eventos_participados"][0], str)


def test_participant_document_omits_empty_optional_fields():
    doc = Participant(nome="Ana", email="ana@x.com", empresa="Acme").to_document()

    assert doc["empresa"] == "Acme"
    assert "profile_picture_base64" not in doc
    assert doc["eventos_participados"] == []


def test_participant_from_json_ignores_event_list():
    participant = Participant.from_json({
        "email": "a@x.com",
        "eventos_participados": [str(ObjectId())],
    })
    assert participant.eventos_participados == []


def test_participant_from_document_rejects_bad_event_list():
    with pytest.raises(ModelDecodeError):
        Participant.from_document({"_id": ObjectId(), "eventos_participados": ["not-an-oid"]})


@pytest.mark.parametrize("raw, expected", [
    ("2025-09-01T09:00:00.5Z", "2025-09-01T09:00:00.5Z"),
    ("2025-09-01T09:00:00.123456789Z", "2025-09-01T09:00:00.123Z"),
    ("2025-09-01T09:00:00.123456Z", "2025-09-01T09:00:00.123Z"),
    ("2025-09-01T09:00:00.100+00:00", "2025-09-01T09:00:00.1Z"),
    ("2025-09-01T09:00:00.000Z", "2025-09-01T09:00:00Z"),
])
def test_event_fraction_digits_are_truncated_to_milliseconds(raw, expected):
    event = Event.from_json({"data": raw})
    assert event.to_json()["data"] == expected
