"""MaterialRecord model — one row per material (cotton, silk, carpet, ...)."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stainsolver.models.base import Base


class MaterialRecord(Base):
    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    display_name: Mapped[str] = mapped_column(String(128), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False, insert_default="other")
    care_notes: Mapped[str] = mapped_column(Text, nullable=False, insert_default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, insert_default="")
    common_uses: Mapped[str] = mapped_column(Text, nullable=False, insert_default="")
