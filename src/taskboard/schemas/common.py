"""Shared response schemas."""

from pydantic import BaseModel

# Upper bound of the INTEGER id columns on PostgreSQL
MAX_ROW_ID = 2_147_483_647


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
