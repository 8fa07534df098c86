"""SQLAlchemy model for donut logs."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class DonutLogModel(Base):
    """Database representation of donut logs."""

    __tablename__ = "donut_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=True)
    amount = Column(Numeric(asdecimal=True), nullable=True)
    ate_at = Column(DateTime(timezone=True), nullable=True)
    donut_type = Column(String(50), nullable=True)
    flavor = Column(String(50), nullable=True)
    glaze = Column(String(50), nullable=True)
    filling = Column(String(50), nullable=True)
    location = Column(String(255), nullable=True)
    note = Column(String(1000), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["DonutLogModel"]
