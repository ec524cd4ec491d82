"""SQLAlchemy ORM models."""

from stainsolver.models.base import Base
from stainsolver.models.guide import GuideRecord
from stainsolver.models.material import MaterialRecord
from stainsolver.models.stain import StainRecord

__all__ = ["Base", "StainRecord", "MaterialRecord", "GuideRecord"]
