from sqlalchemy import Column, Integer, String
from devicehub.db import Base

class Supplier(Base):
    __tablename__ = "suppliers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    tax_id = Column(String)
    contact = Column(String)
    address = Column(String)
