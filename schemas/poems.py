from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

class Poem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    content: str
    theme: str
    style: str
    mood: str
    created_at: datetime = Field(alias="createdAt")

class PoemRequest(BaseModel):
    theme: Optional[str] = None
    style: Optional[str] = None
    mood: Optional[str] = None

class PoemResponse(BaseModel):
    poem: Poem

class SavedPoemsResponse(BaseModel):
    poems: List[Poem]

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
