"""SQLAlchemy ORM models for prices."""

from sqlalchemy import Column, Integer, Numeric, String

# Reuse the declarative base of the car models so one metadata covers both tables
from autolist.adapters.outbound.car.models import Base


class PriceModel(Base):
    """SQLAlchemy model for prices table."""

    __tablename__ = "prices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    currency = Column(String(3), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
