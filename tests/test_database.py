"""Tests for database models and schema."""

from datetime import datetime, timezone

from stainsolver.catalog.schemas import Material, RawGuide, Stain
from stainsolver.models import Base, GuideRecord, MaterialRecord, StainRecord


class TestStainRecordModel:
    def test_create_instance(self):
        record = StainRecord(
            name="coffee",
            display_name="Coffee",
            color="#6F4E37",
            category="beverage",
        )
        assert record.name == "coffee"
        assert record.display_name == "Coffee"
        assert record.description is None

    def test_validates_into_schema(self):
        record = StainRecord(id=3, name="ink", display_name="Ink", color="#000080", category="ink")
        stain = Stain.model_validate(record)
        assert stain.id == 3
        assert stain.category == "ink"


class TestMaterialRecordModel:
    def test_validates_into_schema(self):
        record = MaterialRecord(
            id=1,
            name="silk",
            display_name="Silk",
            type="natural",
            care_notes="Dry clean only",
            description="",
            common_uses="",
        )
        material = Material.model_validate(record)
        assert material.care_notes == "Dry clean only"


class TestGuideRecordModel:
    def test_create_instance(self):
        updated = datetime(2024, 5, 1, tzinfo=timezone.utc)
        record = GuideRecord(
            id=7,
            stain_id=1,
            material_id=2,
            pre_treatment="Blot the stain.",
            products=["dish soap", "cold water", "salt"],
            wash_method="Apply soap. Rinse.",
            warnings=["Never use hot water"],
            effectiveness="good",
            last_updated=updated,
        )
        guide = RawGuide.model_validate(record)
        assert guide.products == ["dish soap", "cold water", "salt"]
        assert guide.last_updated == updated

    def test_one_guide_per_pair(self):
        constraints = {c.name for c in GuideRecord.__table__.constraints}
        assert "uq_guide_stain_material" in constraints

    def test_cascade_on_delete(self):
        fks = {fk.parent.name: fk.ondelete for fk in GuideRecord.__table__.foreign_keys}
        assert fks == {"stain_id": "CASCADE", "material_id": "CASCADE"}


class TestMetadata:
    def test_tables_registered(self):
        assert set(Base.metadata.tables) == {"stains", "materials", "stain_removal_guides"}
