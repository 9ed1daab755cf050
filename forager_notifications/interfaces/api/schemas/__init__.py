from .trigger import DocumentEventPayload, FirestoreDocument, TriggerResponse

__all__ = ["DocumentEventPayload", "FirestoreDocument", "TriggerResponse"]
