"""StainRecord model — one row per stain type (coffee, red_wine, ...)."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stainsolver.models.base import Base


class StainRecord(Base):
    __tablename__ = "stains"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    display_name: Mapped[str] = mapped_column(String(128), nullable=False)
    color: Mapped[str] = mapped_column(String(32), nullable=False, insert_default="")
    category: Mapped[str] = mapped_column(String(32), nullable=False, insert_default="other")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
