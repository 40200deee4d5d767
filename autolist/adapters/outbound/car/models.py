"""SQLAlchemy ORM models for cars."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CarModel(Base):
    """SQLAlchemy model for cars table."""

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    condition = Column(String, nullable=False)
    # Details (embedded)
    body = Column(String, nullable=False)
    model = Column(String, nullable=False)
    manufacturer_code = Column(Integer, nullable=False)
    manufacturer_name = Column(String, nullable=False)
    number_of_doors = Column(Integer, nullable=True)
    fuel_type = Column(String, nullable=True)
    engine = Column(String, nullable=True)
    mileage = Column(Integer, nullable=True)
    model_year = Column(Integer, nullable=False)
    production_year = Column(Integer, nullable=True)
    external_color = Column(String, nullable=True)
    # Location (embedded)
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    zip = Column(String, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    modified_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
