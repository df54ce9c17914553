from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from formbot.database import Base
from formbot.models.form import Form

class Folder(Base):
    __tablename__ = "folders"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Derived from Form.folder_id, never stored on the folder row.
    # passive_deletes="all" keeps the ORM from clearing folder_id on delete.
    forms = relationship(
        Form,
        primaryjoin="Folder.id == foreign(Form.folder_id)",
        back_populates="folder",
        order_by=Form.id,
        passive_deletes="all",
    )

    @property
    def form_ids(self):
        return [form.id for form in self.forms]
