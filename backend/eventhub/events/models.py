"""Event model."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId

from eventhub.utils.serialization import (
    ZERO_TIME, decode_datetime, decode_object_id, decode_str, format_datetime,
)


@dataclass
class Event:
    nome: str = ""
    descricao: str = ""
    data: datetime = ZERO_TIME
    endereco: str = ""
    # Credential display colors
    background_color: str = ""
    text_color: str = ""
    id: Optional[ObjectId] = None

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Event":
        """Decode a request body. Any ``id`` sent by the client is ignored."""
        return cls(
            nome=decode_str(payload, "nome"),
            descricao=decode_str(payload, "descricao"),
            data=decode_datetime(payload, "data"),
            endereco=decode_str(payload, "endereco"),
            background_color=decode_str(payload, "background_color"),
            text_color=decode_str(payload, "text_color"),
        )

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Event":
        event = cls.from_json(doc)
        event.id = decode_object_id(doc, "_id")
        return event

    def mutable_fields(self) -> Dict[str, Any]:
        return {
            "nome": self.nome,
            "descricao": self.descricao,
            "data": self.data,
            "endereco": self.endereco,
            "background_color": self.background_color,
            "text_color": self.text_color,
        }

    def to_json(self) -> Dict[str, Any]:
        payload = {
            "nome": self.nome,
            "descricao": self.descricao,
            "data": format_datetime(self.data),
            "endereco": self.endereco,
            "background_color": self.background_color,
            "text_color": self.text_color,
        }
        if self.id is not None:
            payload["id"] = str(self.id)
        return payload
