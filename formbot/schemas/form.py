from pydantic import BaseModel, Field


class FormCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    folder_id: int = Field(..., alias="folderId")

    class Config:
        str_strip_whitespace = True


class FormOut(BaseModel):
    id: int
    name: str
    folder_id: int = Field(..., serialization_alias="folderId")

    class Config:
        from_attributes = True
