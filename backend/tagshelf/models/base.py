from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, String, Text, DateTime, JSON

from ..database import Base


class BookmarkRow(Base):
    """Saved link or note."""
    __tablename__ = "bookmarks"

    id = Column(String, primary_key=True, default=lambda: str(uuid4()))
    title = Column(String(500), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    url = Column(String(2000), nullable=True)
    tags = Column(JSON, default=list)
    # Opaque reference resolved by the attachment service, never by this app
    image_attachment_id = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
