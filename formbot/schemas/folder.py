from pydantic import BaseModel, Field
from typing import List

from formbot.schemas.form import FormOut


class FolderCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class FolderOut(BaseModel):
    """Folder with its forms as bare ids."""
    id: int
    name: str
    forms: List[int] = Field(default_factory=list, validation_alias="form_ids")

    class Config:
        from_attributes = True


class FolderWithForms(BaseModel):
    """Folder with its forms populated."""
    id: int
    name: str
    forms: List[FormOut] = []

    class Config:
        from_attributes = True
