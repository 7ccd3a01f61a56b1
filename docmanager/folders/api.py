from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from docmanager.shared.db import get_db
from docmanager.folders.schemas import (
    FolderCreate,
    FolderCreated,
    FolderList,
    MessageOut,
)
from docmanager.folders.service import create_folder, list_folders, delete_folder

router = APIRouter(prefix="/folders", tags=["Folders"])

@router.post("", response_model=FolderCreated, status_code=201)
def create_fold(payload: FolderCreate | None = None, db: Session = Depends(get_db)):
    folder = create_folder(db, payload or FolderCreate())
    return {"message": "Folder created successfully", "folder": folder}

@router.get("", response_model=FolderList)
def list_fold(db: Session = Depends(get_db)):
    return list_folders(db)

@router.delete("/{folder_id:int}", response_model=MessageOut)
def delete_fold(folder_id: int, db: Session = Depends(get_db)):
    delete_folder(db, folder_id)
    return {"message": "Folder deleted successfully"}
