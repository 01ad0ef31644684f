"""Task model for the in-memory todo store."""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Any, Dict, Optional


class Task(BaseModel):
    """Task entity representing a todo item.

    Instances are immutable snapshots; the store replaces a whole record on
    every mutation instead of editing fields in place.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(min_length=1)
    description: Optional[str] = None
    completed: bool = False
    created_at: datetime
    updated_at: datetime

    def to_payload(self) -> Dict[str, Any]:
        """Serialize the task for tool responses (timestamps as ISO strings)."""
        return self.model_dump(mode="json")
