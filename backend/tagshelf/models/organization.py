from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, String, DateTime, JSON

from ..database import Base


class FolderRow(Base):
    __tablename__ = "folders"

    id = Column(String, primary_key=True, default=lambda: str(uuid4()))
    tag = Column(String(255), nullable=False, index=True)
    # Plain column rather than a foreign key: dangling parents are tolerated
    # and rendered as extra roots when the tree is built.
    parent_id = Column(String, nullable=True, index=True)
    tag_groups = Column(JSON, default=list)
    color = Column(String(16), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
