from typing import List, Optional

from pydantic import BaseModel, Field


class ActionResponse(BaseModel):
    region: Optional[str] = Field(None, description="Output region rewritten by the action")
    content: Optional[str] = Field(None, description="Current content of that region")
    notices: List[str] = Field(
        default_factory=list,
        description="User notices raised while handling the action"
    )
