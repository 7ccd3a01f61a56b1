from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from docmanager.shared.db import MAX_ID

class FolderCreate(BaseModel):
    name: Optional[str] = None
    created_by: Optional[int] = Field(default=None, ge=-MAX_ID - 1, le=MAX_ID)

class FolderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    created_by: int | None = None
    created_at: datetime

class FolderCreated(BaseModel):
    message: str
    folder: FolderOut

class FolderListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    created_at: datetime
    created_by: int | None = None
    created_by_name: str | None = None

class FolderSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str

class MessageOut(BaseModel):
    message: str

FolderList = List[FolderListItem]
