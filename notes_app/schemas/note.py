"""
Note Schemas.

Domain shape of a note, independent of how it is stored.
"""

from pydantic import BaseModel, ConfigDict, Field

NEW_NOTE_ID = 0
"""Sentinel id of a note that has not been persisted yet."""


class Note(BaseModel):
    """
    A user-authored title/content pair with a recency timestamp.

    Instances are immutable and compare field by field.
    """

    id: int = Field(default=NEW_NOTE_ID, ge=0, description="0 until first saved")
    title: str = Field(description="Note title")
    content: str = Field(default="", description="Note body, may be empty")
    timestamp: int = Field(description="Last save time, epoch milliseconds")

    model_config = ConfigDict(frozen=True, from_attributes=True)
