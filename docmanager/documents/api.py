from fastapi import APIRouter, UploadFile, File as Upload, Form, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from docmanager.shared.db import get_db
from docmanager.documents.headers import attachment_disposition
from docmanager.documents.schemas import DocumentUploaded, FolderDocuments
from docmanager.documents.service import list_folder_documents, upload_document, get_document

router = APIRouter(tags=["Documents"])

@router.get("/folders/{folder_id:int}/documents", response_model=FolderDocuments)
def folder_documents(folder_id: int, db: Session = Depends(get_db)):
    return list_folder_documents(db, folder_id)

@router.post("/documents", response_model=DocumentUploaded, status_code=201)
async def upload(
    folder_id: str | None = Form(None),
    uploaded_by: str | None = Form(None),
    file: UploadFile | None = Upload(None),
    db: Session = Depends(get_db),
):
    doc = await upload_document(db, folder_id, uploaded_by, file)
    return {"message": "Document uploaded successfully", "document": doc}

@router.get("/documents/{document_id:int}", response_class=Response)
def download(document_id: int, db: Session = Depends(get_db)):
    """
    Raw download: the stored bytes are the whole body, no JSON envelope.
    Content-Type is set verbatim so text/* types get no charset appended.
    """
    doc = get_document(db, document_id)
    return Response(
        content=doc.content,
        headers={
            "Content-Type": doc.mime_type,
            "Content-Length": str(doc.size),
            "Content-Disposition": attachment_disposition(doc.filename),
        },
    )
