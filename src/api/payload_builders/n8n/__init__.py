"""Builders de eventos enviados ao n8n."""

from api.payload_builders.n8n.auth_form_event import (
    EVENT_SOURCE,
    EVENT_TYPE,
    AuthFormEventBuilder,
)

__all__ = ["EVENT_SOURCE", "EVENT_TYPE", "AuthFormEventBuilder"]
