from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text, func

from database import Base


class AdminOpportunity(Base):
    """Opportunity curated by platform staff; shown publicly while active."""

    __tablename__ = "admin_investment_opportunities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    sector = Column(Text, nullable=True)
    sub_industry = Column(Text, nullable=True)
    country = Column(Text, nullable=True)
    stage = Column(Text, nullable=True)
    # Free text, e.g. "NAD 1M - 5M"
    investment_range = Column(Text, nullable=True)
    requirements = Column(Text, nullable=True)
    contact = Column(Text, nullable=True)
    image_key = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class SmeOpportunity(Base):
    """
    Legacy fundraising opportunity submitted by an SME.
    Reads and writes go through the probed column names (services.schema_probe),
    this mapping only describes the table as this service creates it.
    """

    __tablename__ = "investment_opportunities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sme_id = Column(Integer, ForeignKey("smes.id"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    funding_required = Column(Numeric(15, 2), nullable=False)
    equity_offered = Column(Numeric(5, 2), nullable=True)
    use_of_funds = Column(Text, nullable=True)
    expected_roi = Column(Numeric(5, 2), nullable=True)
    investment_timeline = Column(String(100), nullable=True)
    status = Column(String(50), nullable=False, default="open")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
