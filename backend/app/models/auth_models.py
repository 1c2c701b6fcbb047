"""Pydantic models for the authorization header as read from a request."""

from enum import Enum

from pydantic import BaseModel


class HeaderKind(str, Enum):
    ABSENT = "absent"
    SINGLE = "single"
    MULTIPLE = "multiple"


class AuthorizationHeader(BaseModel):
    kind: HeaderKind
    values: list[str] = []
