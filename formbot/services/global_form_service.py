from typing import List

from sqlalchemy.orm import Session

from formbot.exceptions import InvalidInputError
from formbot.models.global_form import GlobalForm


def create_global_form(db: Session, name: str) -> GlobalForm:
    if not name or not name.strip():
        raise InvalidInputError("Form name is required")

    global_form = GlobalForm(name=name.strip())
    db.add(global_form)
    db.commit()
    db.refresh(global_form)
    return global_form


def list_global_forms(db: Session) -> List[GlobalForm]:
    return db.query(GlobalForm).order_by(GlobalForm.id).all()
