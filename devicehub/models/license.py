from sqlalchemy import Column, Integer, String, Date, ForeignKey
from devicehub.db import Base

class License(Base):
    __tablename__ = "licenses"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    type = Column(String)
    serial_number = Column(String)
    acquisition_date = Column(Date)
    expiration_date = Column(Date)
    software = Column(String)
    asset_id = Column(Integer, ForeignKey("assets.id", ondelete="RESTRICT"), nullable=False, index=True)
