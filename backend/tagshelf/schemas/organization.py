from pydantic import BaseModel
from typing import List, Optional

# --- Folder Schemas ---

class FolderBase(BaseModel):
    tag: str
    parent_id: Optional[str] = None
    tag_groups: List[str] = []
    color: Optional[str] = None

class FolderCreate(FolderBase):
    id: Optional[str] = None
    # Alternative to parent_id: the path of the parent folder, "/" for the root
    parent_path: Optional[str] = None

class FolderUpdate(BaseModel):
    tag: Optional[str] = None
    parent_id: Optional[str] = None
    tag_groups: Optional[List[str]] = None
    color: Optional[str] = None

class FolderResponse(FolderBase):
    id: str
    color: str

class TagFolderResponse(BaseModel):
    id: str
    tag: str
    is_root: bool
    tag_groups: List[str] = []
    color: str
    children: List["TagFolderResponse"] = []

    class Config:
        from_attributes = True

class FolderColorsResponse(BaseModel):
    colors: List[str]
    default: str

# --- Tag Schemas ---

class TagCountResponse(BaseModel):
    tag: str
    count: int

class TagChoiceResponse(BaseModel):
    tag: str
    selected: bool = False
    label: Optional[str] = None

    class Config:
        from_attributes = True

class TagGroupResponse(BaseModel):
    prefix: str
    tags: List[TagChoiceResponse]

    class Config:
        from_attributes = True

# Resolve forward reference
TagFolderResponse.model_rebuild()
