from sqlalchemy import select, desc, delete
from sqlalchemy.orm import Session

from docmanager.auth.models import User
from docmanager.folders.models import Folder
from docmanager.shared.db import in_id_range


class FolderRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, folder_id: int) -> Folder | None:
        if not in_id_range(folder_id):
            return None
        return self.db.get(Folder, folder_id)

    def exists(self, folder_id: int) -> bool:
        if not in_id_range(folder_id):
            return False
        return self.db.scalar(select(Folder.id).where(Folder.id == folder_id)) is not None

    def create(self, name: str, created_by: int | None = None) -> Folder:
        f = Folder(name=name, created_by=created_by)
        self.db.add(f)
        self.db.flush()
        return f

    def list_with_creator(self) -> list[dict]:
        """All folders newest first, each row carrying the creator's name (or None)."""
        stmt = (
            select(
                Folder.id,
                Folder.name,
                Folder.created_at,
                Folder.created_by,
                User.name.label("created_by_name"),
            )
            .outerjoin(User, User.id == Folder.created_by)
            .order_by(desc(Folder.created_at), desc(Folder.id))
        )
        return [dict(row) for row in self.db.execute(stmt).mappings()]

    def delete(self, folder_id: int) -> int:
        # documents go with it through documents.folder_id ON DELETE CASCADE
        result = self.db.execute(delete(Folder).where(Folder.id == folder_id))
        return result.rowcount
