from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from ..services import FOLDER_COLORS, Folder, FolderError, FolderResult, FolderStore, get_folder_store, new_id
from ..schemas.organization import FolderColorsResponse, FolderCreate, FolderUpdate, FolderResponse, TagFolderResponse

router = APIRouter()

ERROR_STATUS = {
    FolderError.NOT_FOUND: 404,
    FolderError.HAS_CHILDREN: 409,
    FolderError.DUPLICATE_ID: 409,
    FolderError.CYCLE: 409,
    FolderError.INVALID_TAG: 422,
}


def to_response(folder: Folder) -> FolderResponse:
    return FolderResponse(
        id=folder.id,
        tag=folder.tag,
        parent_id=folder.parent,
        tag_groups=list(folder.tag_groups),
        color=folder.color,
    )


def unwrap(result: FolderResult) -> Folder:
    if not result.ok:
        raise HTTPException(status_code=ERROR_STATUS[result.error], detail=result.message)
    return result.folder


@router.get("", response_model=List[TagFolderResponse])
async def get_folders(store: FolderStore = Depends(get_folder_store)):
    """Folder forest; each top-level folder carries its full subtree."""
    return await store.get_root_folders()


@router.get("/colors", response_model=FolderColorsResponse)
async def get_folder_colors(store: FolderStore = Depends(get_folder_store)):
    """Palette offered for folder colors."""
    return FolderColorsResponse(colors=list(FOLDER_COLORS), default=store.default_color)


@router.get("/{id}", response_model=FolderResponse)
async def get_folder(id: str, store: FolderStore = Depends(get_folder_store)):
    folder = await store.get_by_id(id)
    if not folder:
        raise HTTPException(status_code=404, detail="Folder not found")
    return to_response(folder)


@router.get("/{id}/children", response_model=List[TagFolderResponse])
async def get_child_folders(id: str, store: FolderStore = Depends(get_folder_store)):
    if not await store.get_by_id(id):
        raise HTTPException(status_code=404, detail="Folder not found")
    return await store.get_child_folders(id)


@router.post("", response_model=FolderResponse, status_code=201)
async def create_folder(folder: FolderCreate, store: FolderStore = Depends(get_folder_store)):
    parent_id = folder.parent_id
    if parent_id is None and folder.parent_path:
        parent_id = await store.resolve_parent_id(folder.parent_path)

    result = await store.create(Folder(
        id=folder.id or new_id(),
        tag=folder.tag,
        parent=parent_id,
        tag_groups=tuple(folder.tag_groups),
        color=folder.color or "",
    ))
    return to_response(unwrap(result))


@router.patch("/{id}", response_model=FolderResponse)
async def update_folder(id: str, folder_update: FolderUpdate, store: FolderStore = Depends(get_folder_store)):
    db_folder = await store.get_by_id(id)
    if not db_folder:
        raise HTTPException(status_code=404, detail="Folder not found")

    update_data = folder_update.model_dump(exclude_unset=True)
    if "parent_id" in update_data:
        update_data["parent"] = update_data.pop("parent_id")
    if update_data.get("tag_groups") is not None:
        update_data["tag_groups"] = tuple(update_data["tag_groups"])
    changes = {key: value for key, value in update_data.items() if value is not None or key == "parent"}

    result = await store.update(replace(db_folder, **changes))
    return to_response(unwrap(result))


@router.delete("/{id}")
async def delete_folder(id: str, store: FolderStore = Depends(get_folder_store)):
    unwrap(await store.delete(id))
    return {"status": "success"}
