from sqlalchemy import Column, Integer, Date, ForeignKey
from devicehub.db import Base

class Warranty(Base):
    __tablename__ = "warranties"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    start_date = Column(Date)
    end_date = Column(Date)
    supplier_id = Column(Integer, ForeignKey("suppliers.id", ondelete="RESTRICT"), nullable=False, index=True)
    # one warranty per asset
    asset_id = Column(Integer, ForeignKey("assets.id", ondelete="RESTRICT"), nullable=False, unique=True)
