"""Pydantic models describing Firestore trigger payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FirestoreDocument(BaseModel):
    """Document snapshot embedded in a ``DocumentEventData`` body."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = Field(default=None, description="Full resource name of the document")
    fields: dict[str, Any] = Field(
        default_factory=dict, description="Typed Firestore values keyed by field name"
    )


class DocumentEventPayload(BaseModel):
    """JSON body delivered for ``google.cloud.firestore.document.v1`` events."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    value: FirestoreDocument | None = Field(
        default=None, description="Document after the change; absent on delete"
    )
    old_value: FirestoreDocument | None = Field(
        default=None,
        alias="oldValue",
        description="Document before the change; absent on create",
    )

    def document_name(self) -> str | None:
        for document in (self.value, self.old_value):
            if document is not None and document.name:
                return document.name
        return None


class TriggerResponse(BaseModel):
    """Outcome reported back to the event delivery platform."""

    status: str
    stored: bool
    pushed: bool
    reason: str | None = None


__all__ = ["DocumentEventPayload", "FirestoreDocument", "TriggerResponse"]
