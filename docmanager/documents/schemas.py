from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import List

from docmanager.folders.schemas import FolderSummary

class DocumentMeta(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    filename: str
    mime_type: str
    size: int
    created_at: datetime

class DocumentOut(DocumentMeta):
    folder_id: int
    uploaded_by: int | None = None

class DocumentUploaded(BaseModel):
    message: str
    document: DocumentOut

class FolderDocuments(BaseModel):
    folder: FolderSummary
    documents: List[DocumentMeta]
