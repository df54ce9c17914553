from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from formbot.database import Base


class Form(Base):
    __tablename__ = "forms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Only link between a form and its folder. No FK constraint: deleting a
    # folder leaves its forms, and their folder_id, untouched.
    folder_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    folder = relationship(
        "Folder",
        primaryjoin="foreign(Form.folder_id) == Folder.id",
        back_populates="forms",
    )
