"""Domain errors raised by the catalog and storage layers.

Routes translate these into JSON responses; content generation never raises them.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class NotFoundError(CatalogError):
    """A referenced stain, material, or guide does not exist."""

    def __init__(self, entity: str, identifier: str | int):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity.capitalize()} not found")


class AlreadyExistsError(CatalogError):
    """A stain, material, or guide with the same identity already exists."""

    def __init__(self, entity: str, identifier: str | int):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity.capitalize()} already exists")


class DuplicateGuideError(AlreadyExistsError):
    """A guide already exists for the stain/material pair."""

    def __init__(self, stain_id: int, material_id: int):
        self.stain_id = stain_id
        self.material_id = material_id
        super().__init__("guide", f"{stain_id}:{material_id}")


class UpstreamError(CatalogError):
    """Storage read failed or timed out."""


class ContentValidationError(CatalogError):
    """One or more guides failed content validation."""

    def __init__(self, report):
        self.report = report
        super().__init__(
            f"{report.summary.invalid} of {report.summary.total} guides failed validation"
        )
