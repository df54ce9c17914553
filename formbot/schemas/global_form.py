from pydantic import BaseModel, Field

class GlobalFormCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)

    class Config:
        str_strip_whitespace = True

class GlobalFormOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
