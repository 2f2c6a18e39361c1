from sqlalchemy import Column, Integer, String, Text, Date, DateTime, func
from app.db.base import Base


class Person(Base):
    __tablename__ = "people"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False, index=True)
    mobile_number = Column(String(10), nullable=False, doc="Stored as text, never parsed")
    date_of_birth = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Person(id={self.id}, email={self.email})>"
