from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from formbot.dependencies import get_db
from formbot.exceptions import NotFoundError
from formbot.schemas.common import MessageResponse
from formbot.schemas.form import FormCreate, FormOut
from formbot.services import form_service

router = APIRouter(prefix="/api/forms", tags=["Forms"])


@router.post("", response_model=FormOut, status_code=status.HTTP_201_CREATED)
def create_form(form: FormCreate, db: Session = Depends(get_db)):
    """Create a form inside an existing folder."""
    try:
        return form_service.create_form(db, form.name, form.folder_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{folder_id}", response_model=List[FormOut])
def list_forms(folder_id: int, db: Session = Depends(get_db)):
    return form_service.list_forms_by_folder(db, folder_id)


@router.delete("/{form_id}", response_model=MessageResponse)
def delete_form(form_id: int, db: Session = Depends(get_db)):
    try:
        form_service.delete_form(db, form_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Form deleted successfully"}
