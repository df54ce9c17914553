from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from formbot.dependencies import get_db
from formbot.exceptions import InvalidInputError
from formbot.schemas.global_form import GlobalFormCreate, GlobalFormOut
from formbot.services import global_form_service

router = APIRouter(prefix="/api/globalForms", tags=["Global Forms"])


@router.get("", response_model=List[GlobalFormOut])
def list_global_forms(db: Session = Depends(get_db)):
    return global_form_service.list_global_forms(db)


@router.post("", response_model=GlobalFormOut, status_code=status.HTTP_201_CREATED)
def create_global_form(global_form: GlobalFormCreate, db: Session = Depends(get_db)):
    try:
        return global_form_service.create_global_form(db, global_form.name)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
