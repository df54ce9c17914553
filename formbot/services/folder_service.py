"""
Folder store. A folder's forms are read through Form.folder_id.
"""
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from formbot.exceptions import ConflictError, NotFoundError
from formbot.logger import logger
from formbot.models.folder import Folder
from formbot.models.form import Form


def create_folder(db: Session, name: str) -> Folder:
    folder = Folder(name=name)
    db.add(folder)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Folder name must be unique") from exc
    db.refresh(folder)
    logger.info(f"Created folder {folder.id}")
    return folder


def list_folders(db: Session) -> List[Folder]:
    """All folders in creation order, forms loaded up front."""
    return (
        db.query(Folder)
        .options(selectinload(Folder.forms))
        .order_by(Folder.id)
        .all()
    )


def delete_folder(db: Session, folder_id: int) -> None:
    """
    Delete a folder row.

    Forms inside the folder are kept and still carry its id.

    Raises:
        NotFoundError: If no folder has this id
    """
    folder = db.query(Folder).filter(Folder.id == folder_id).first()
    if folder is None:
        raise NotFoundError("Folder not found")

    orphaned = db.query(Form).filter(Form.folder_id == folder_id).count()
    db.delete(folder)
    db.commit()
    logger.info(f"Deleted folder {folder_id}, {orphaned} form(s) kept")
