from sqlalchemy import Column, Integer, String, Date, Float, ForeignKey
from devicehub.db import Base

class Asset(Base):
    __tablename__ = "assets"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String)
    manufacturer = Column(String)
    model = Column(String)
    serial_number = Column(String)
    acquisition_date = Column(Date)
    value = Column(Float)
    location = Column(String)
    status = Column(String)
    responsible_id = Column(Integer, ForeignKey("employees.id", ondelete="RESTRICT"), nullable=True, index=True)
    department_id = Column(Integer, ForeignKey("departments.id", ondelete="RESTRICT"), nullable=True, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id", ondelete="RESTRICT"), nullable=True, index=True)
