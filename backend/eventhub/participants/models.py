"""Participant model."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bson import ObjectId

from eventhub.utils.serialization import (
    decode_object_id, decode_object_id_list, decode_str,
)


@dataclass
class Participant:
    nome: str = ""
    email: str = ""
    empresa: str = ""
    profile_picture_base64: str = ""
    # Only the registration flow appends to this list
    eventos_participados: List[ObjectId] = field(default_factory=list)
    id: Optional[ObjectId] = None

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Participant":
        """Decode a request body; ``id`` and ``eventos_participados`` are ignored."""
        return cls(
            nome=decode_str(payload, "nome"),
            email=decode_str(payload, "email"),
            empresa=decode_str(payload, "empresa"),
            profile_picture_base64=decode_str(payload, "profile_picture_base64"),
        )

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Participant":
        participant = cls.from_json(doc)
        participant.eventos_participados = decode_object_id_list(doc, "eventos_participados")
        participant.id = decode_object_id(doc, "_id")
        return participant

    def optional_fields(self) -> Dict[str, str]:
        """Company and picture, only when non-empty."""
        fields = {}
        if self.empresa:
            fields["empresa"] = self.empresa
        if self.profile_picture_base64:
            fields["profile_picture_base64"] = self.profile_picture_base64
        return fields

    def to_document(self) -> Dict[str, Any]:
        doc = {"nome": self.nome, "email": self.email}
        doc.update(self.optional_fields())
        doc["eventos_participados"] = list(self.eventos_participados)
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    def to_json(self) -> Dict[str, Any]:
        payload = {"nome": self.nome, "email": self.email}
        payload.update(self.optional_fields())
        payload["eventos_participados"] = [str(oid) for oid in self.eventos_participados]
        if self.id is not None:
            payload["id"] = str(self.id)
        return payload
