from sqlalchemy import Column, DateTime, Integer, String, func

from database import Base


class Sme(Base):
    __tablename__ = "smes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    business_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    # Stored as free text, not as references to the lookup tables
    industry_sector = Column(String(255), nullable=True, index=True)
    region = Column(String(100), nullable=True, index=True)
    status = Column(String(50), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
