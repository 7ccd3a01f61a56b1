from sqlalchemy import select, desc, func
from sqlalchemy.orm import Session, undefer

from docmanager.documents.models import Document
from docmanager.shared.db import in_id_range


class DocumentRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_folder(self, folder_id: int) -> list[Document]:
        # content stays deferred: listings never load the payload
        stmt = (
            select(Document)
            .where(Document.folder_id == folder_id)
            .order_by(desc(Document.created_at), desc(Document.id))
        )
        return list(self.db.scalars(stmt).all())

    def get_with_content(self, document_id: int) -> Document | None:
        if not in_id_range(document_id):
            return None
        stmt = select(Document).where(Document.id == document_id).options(undefer(Document.content))
        return self.db.scalars(stmt).first()

    def create(
        self,
        folder_id: int,
        filename: str,
        mime_type: str,
        size: int,
        content: bytes,
        uploaded_by: int | None = None,
    ) -> Document:
        d = Document(
            folder_id=folder_id,
            uploaded_by=uploaded_by,
            filename=filename,
            mime_type=mime_type,
            size=size,
            content=content,
        )
        self.db.add(d)
        self.db.flush()
        return d

    def count_for_folder(self, folder_id: int) -> int:
        stmt = select(func.count()).select_from(Document).where(Document.folder_id == folder_id)
        return int(self.db.scalar(stmt))
