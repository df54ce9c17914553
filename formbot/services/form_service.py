"""
Form store. Each form write is a single row change.
"""
from typing import List

from sqlalchemy.orm import Session

from formbot.exceptions import NotFoundError
from formbot.logger import logger
from formbot.models.folder import Folder
from formbot.models.form import Form


def create_form(db: Session, name: str, folder_id: int) -> Form:
    """
    Create a form inside an existing folder.

    Raises:
        NotFoundError: If the folder does not exist
    """
    folder = db.query(Folder).filter(Folder.id == folder_id).first()
    if folder is None:
        raise NotFoundError("Folder not found")

    form = Form(name=name, folder_id=folder.id)
    db.add(form)
    db.commit()
    db.refresh(form)
    logger.info(f"Created form {form.id} in folder {folder_id}")
    return form


def list_forms_by_folder(db: Session, folder_id: int) -> List[Form]:
    return db.query(Form).filter(Form.folder_id == folder_id).order_by(Form.id).all()


def delete_form(db: Session, form_id: int) -> None:
    form = db.query(Form).filter(Form.id == form_id).first()
    if form is None:
        raise NotFoundError("Form not found")

    db.delete(form)
    db.commit()
    logger.info(f"Deleted form {form_id}")
