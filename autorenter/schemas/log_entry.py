"""Log Entry Schema — client-side log record posted to /log.

Invariants:
    - message and level optional on input: presence is checked by LogEntryValidator
    - Nothing is persisted; the record is forwarded to server logging
"""

from pydantic import BaseModel, Field


class LogEntryModel(BaseModel):
    """Log record as sent by a client application."""
    message: str | None = Field(None, max_length=4000)
    level: str | None = Field(None, max_length=20)
    source: str | None = Field(None, max_length=100)
