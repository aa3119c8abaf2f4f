from sqlalchemy import Column, DateTime, Index, Integer, String, Text, func

from database import Base


class InvestmentInterest(Base):
    __tablename__ = "investment_interests"
    __table_args__ = (
        Index("idx_investment_interests_opp", "opportunity_source", "opportunity_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 'admin' | 'sme'; points into one of two tables, so no foreign key
    opportunity_source = Column(String(20), nullable=False)
    opportunity_id = Column(Integer, nullable=False)
    name = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    message = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="new", index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
