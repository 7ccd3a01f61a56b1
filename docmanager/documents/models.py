from datetime import datetime, timezone
from typing import TYPE_CHECKING
from sqlalchemy import String, DateTime, Integer, LargeBinary, ForeignKey
from sqlalchemy.dialects.mysql import LONGBLOB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from docmanager.shared.db import Base

if TYPE_CHECKING:
    from docmanager.folders.models import Folder

DEFAULT_MIME = "application/octet-stream"

class Document(Base):
    __tablename__ = "documents"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    folder_id: Mapped[int] = mapped_column(Integer, ForeignKey("folders.id", ondelete="CASCADE"), index=True)
    # weak reference to users.id
    uploaded_by: Mapped[int | None] = mapped_column(Integer, nullable=True)

    filename: Mapped[str] = mapped_column(String(255))  # as sent by the client, untrusted
    mime_type: Mapped[str] = mapped_column(String(127), default=DEFAULT_MIME)
    size: Mapped[int] = mapped_column(Integer)  # reported by the transport, not recomputed
    # BLOB on most backends; LONGBLOB on MySQL for files past 64 KB
    content: Mapped[bytes] = mapped_column(LargeBinary().with_variant(LONGBLOB(), "mysql"), deferred=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )

    folder: Mapped["Folder"] = relationship(back_populates="documents")
