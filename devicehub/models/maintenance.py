from sqlalchemy import Column, Integer, String, Date, Float, ForeignKey
from devicehub.db import Base

class MaintenanceRecord(Base):
    __tablename__ = "maintenance_records"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date)
    description = Column(String)
    cost = Column(Float)
    asset_id = Column(Integer, ForeignKey("assets.id", ondelete="RESTRICT"), nullable=False, index=True)
