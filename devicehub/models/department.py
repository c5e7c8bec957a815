from sqlalchemy import Column, Integer, String
from devicehub.db import Base

class Department(Base):
    __tablename__ = "departments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String)
