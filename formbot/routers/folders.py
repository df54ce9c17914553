from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from formbot.dependencies import get_db
from formbot.exceptions import ConflictError, NotFoundError
from formbot.logger import logger
from formbot.routers.auth import get_current_user_id
from formbot.schemas.common import MessageResponse
from formbot.schemas.folder import FolderCreate, FolderOut, FolderWithForms
from formbot.services import folder_service

router = APIRouter(tags=["Folders"])


@router.post("/api/folders", response_model=FolderOut, status_code=status.HTTP_201_CREATED)
def create_folder(folder: FolderCreate, db: Session = Depends(get_db)):
    try:
        return folder_service.create_folder(db, folder.name)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/api/folders", response_model=List[FolderOut])
def list_folders(db: Session = Depends(get_db)):
    """All folders, each with the ids of its forms."""
    return folder_service.list_folders(db)


@router.delete("/api/folders/{folder_id}", response_model=MessageResponse)
def delete_folder(folder_id: int, db: Session = Depends(get_db)):
    try:
        folder_service.delete_folder(db, folder_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Folder deleted successfully"}


@router.get("/folders", response_model=List[FolderWithForms])
def list_folders_with_forms(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """All folders with their forms populated. Requires a bearer token."""
    return folder_service.list_folders(db)


@router.delete("/folders/{folder_id}", response_model=MessageResponse)
def delete_folder_authenticated(
    folder_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Bearer-protected delete. Reports success whether or not the folder existed."""
    try:
        folder_service.delete_folder(db, folder_id)
    except NotFoundError:
        logger.info(f"Folder {folder_id} already absent")
    return {"message": "Folder deleted"}
