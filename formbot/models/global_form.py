from sqlalchemy import Column, Integer, String, DateTime, func
from formbot.database import Base


class GlobalForm(Base):
    __tablename__ = "global_forms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
