import logging
from fastapi import UploadFile
from sqlalchemy.orm import Session

from docmanager.documents.models import Document, DEFAULT_MIME
from docmanager.documents.repository import DocumentRepository
from docmanager.folders.repository import FolderRepository
from docmanager.folders.service import get_folder
from docmanager.shared.db import in_id_range
from docmanager.shared.errors import ValidationError, NotFoundError

logger = logging.getLogger(__name__)


def _parse_id(raw: str | None) -> int | None:
    raw = (raw or "").strip()
    if not (raw.isdecimal() and raw.isascii()):
        return None
    value = int(raw)
    return value if in_id_range(value) else None


def list_folder_documents(db: Session, folder_id: int) -> dict:
    folder = get_folder(db, folder_id)
    docs = DocumentRepository(db).list_for_folder(folder_id)
    return {"folder": folder, "documents": docs}


async def upload_document(
    db: Session,
    folder_id: str | None,
    uploaded_by: str | None,
    uploaded: UploadFile | None,
) -> Document:
    """
    Store a multipart upload inline in the documents table.

    The whole file is read into memory. ``size`` is what the multipart parser
    counted while spooling the part, falling back to the length read.
    Raises ValidationError / NotFoundError before anything is written.
    """
    fid = _parse_id(folder_id)
    if fid is None:
        raise ValidationError("folder_id is required and must be numeric")

    uid = None
    if uploaded_by is not None and uploaded_by.strip():
        uid = _parse_id(uploaded_by)
        if uid is None:
            raise ValidationError("uploaded_by must be numeric")

    if not FolderRepository(db).exists(fid):
        raise NotFoundError("Folder not found")

    if uploaded is None or not uploaded.filename:
        raise ValidationError("A file is required and must be uploaded correctly")

    content = await uploaded.read()
    await uploaded.close()
    size = uploaded.size if uploaded.size is not None else len(content)

    doc = DocumentRepository(db).create(
        folder_id=fid,
        uploaded_by=uid,
        filename=uploaded.filename,
        mime_type=uploaded.content_type or DEFAULT_MIME,
        size=size,
        content=content,
    )
    db.commit()
    db.refresh(doc)
    logger.info("stored document id=%s folder=%s size=%s", doc.id, fid, size)
    return doc


def get_document(db: Session, document_id: int) -> Document:
    doc = DocumentRepository(db).get_with_content(document_id)
    if not doc:
        raise NotFoundError("Document not found")
    return doc
