from datetime import datetime, timezone
from typing import TYPE_CHECKING
from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from docmanager.shared.db import Base

if TYPE_CHECKING:
    from docmanager.documents.models import Document

class Folder(Base):
    __tablename__ = "folders"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    # weak reference to users.id: no FK, never validated
    created_by: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )

    # rows are removed by ON DELETE CASCADE; the ORM never loads them to delete
    documents: Mapped[list["Document"]] = relationship(
        back_populates="folder", cascade="all, delete-orphan", passive_deletes=True
    )
