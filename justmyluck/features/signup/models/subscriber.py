from sqlalchemy import Column, Integer, String, Text

from justmyluck.platform.db.base import Base


class Subscriber(Base):
    __tablename__ = "subscribers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False)
    source = Column(Text)
    # ISO-8601 UTC string, written once
    created_at = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Subscriber(email='{self.email}', source='{self.source}')>"
