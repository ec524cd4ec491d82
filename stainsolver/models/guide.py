"""GuideRecord model — authored removal instructions for a stain/material pair.

Products and warnings are stored as JSON arrays and validated into
RawGuide on read.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from stainsolver.models.base import Base


class GuideRecord(Base):
    __tablename__ = "stain_removal_guides"
    __table_args__ = (
        UniqueConstraint("stain_id", "material_id", name="uq_guide_stain_material"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    stain_id: Mapped[int] = mapped_column(
        ForeignKey("stains.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    material_id: Mapped[int] = mapped_column(
        ForeignKey("materials.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    pre_treatment: Mapped[str] = mapped_column(Text, nullable=False)
    products: Mapped[list] = mapped_column(JSONB, nullable=False, default=list)
    wash_method: Mapped[str] = mapped_column(Text, nullable=False)
    warnings: Mapped[list] = mapped_column(JSONB, nullable=False, default=list)
    effectiveness: Mapped[str] = mapped_column(String(16), nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
