import logging
from sqlalchemy.orm import Session

from docmanager.folders.models import Folder
from docmanager.folders.repository import FolderRepository
from docmanager.folders.schemas import FolderCreate
from docmanager.shared.errors import ValidationError, NotFoundError

logger = logging.getLogger(__name__)

def create_folder(db: Session, payload: FolderCreate) -> Folder:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Folder name is required")
    # created_by is stored as given; it is not checked against users
    f = FolderRepository(db).create(name=name, created_by=payload.created_by)
    db.commit()
    db.refresh(f)
    logger.info("created folder id=%s", f.id)
    return f

def list_folders(db: Session):
    return FolderRepository(db).list_with_creator()

def get_folder(db: Session, folder_id: int) -> Folder:
    f = FolderRepository(db).get(folder_id)
    if not f:
        raise NotFoundError("Folder not found")
    return f

def delete_folder(db: Session, folder_id: int) -> None:
    folders = FolderRepository(db)
    if not folders.exists(folder_id):
        raise NotFoundError("Folder not found")
    # existence check, delete and document cascade commit together
    folders.delete(folder_id)
    db.commit()
    logger.info("deleted folder id=%s", folder_id)
