from sqlalchemy import Column, Integer, String, ForeignKey
from devicehub.db import Base

class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    role = Column(String)
    email = Column(String)
    # stored as given, never returned by the API
    credential = Column(String)
    department_id = Column(Integer, ForeignKey("departments.id", ondelete="RESTRICT"), nullable=True, index=True)
