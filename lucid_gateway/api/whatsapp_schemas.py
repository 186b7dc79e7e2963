"""
Wire models for the WhatsApp webhook endpoints.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class HookVerificationRequest(BaseModel):
    """Query parameters of the subscription handshake (hub.mode, ...).

    All three are required; an empty value counts as missing.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    mode: str = Field(alias="hub.mode", min_length=1)
    challenge: str = Field(alias="hub.challenge", min_length=1)
    verify_token: str = Field(alias="hub.verify_token", min_length=1)


class HookVerificationResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    challenge: str


class NotificationModel(BaseModel):
    """Base for notification bodies: a JSON null falls back to the field default."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Profile(NotificationModel):
    name: str = ""


class Contact(NotificationModel):
    profile: Profile = Field(default_factory=Profile)
    wa_id: str = ""


class TextMessage(NotificationModel):
    body: str = ""


class Message(NotificationModel):
    from_: str = Field(default="", alias="from")
    id: str = ""
    timestamp: str = ""
    type: str = ""
    text: Optional[TextMessage] = None


class Status(NotificationModel):
    id: str = ""
    status: str = ""
    timestamp: str = ""
    recipient_id: str = ""


class Metadata(NotificationModel):
    display_phone_number: str = ""
    phone_number_id: str = ""


class ChangeValue(NotificationModel):
    messaging_product: str = ""
    metadata: Metadata = Field(default_factory=Metadata)
    contacts: List[Contact] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)
    statuses: List[Status] = Field(default_factory=list)


class Change(NotificationModel):
    value: ChangeValue = Field(default_factory=ChangeValue)
    field: str = ""


class Entry(NotificationModel):
    id: str = ""
    changes: List[Change] = Field(default_factory=list)


class WebhookPayload(NotificationModel):
    # Missing object is treated like any non-business-account object: ignored.
    object: str = ""
    entry: List[Entry] = Field(default_factory=list)
