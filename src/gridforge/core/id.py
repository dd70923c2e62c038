"""ID Generation System.

ULID-based IDs for widgets and projects.

- ULIDs: lexicographically sortable, timestamp-based, globally unique
- Type-safe: NewType wrappers for each ID category
- Prefixed: readable in logs and interchange files (element_*, proj_*)
"""

from typing import NewType
from ulid import ULID

WidgetID = NewType("WidgetID", str)
"""Widget instance identifier, stable across edits"""

ProjectID = NewType("ProjectID", str)
"""Project file identifier"""


class Prefix:
    """ID prefix constants."""

    WIDGET = "element"
    PROJECT = "proj"


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


_generator = Generator()


def new_widget_id() -> WidgetID:
    """Generate new widget ID."""
    return WidgetID(_generator.generate_with_prefix(Prefix.WIDGET))


def new_project_id() -> ProjectID:
    """Generate new project ID."""
    return ProjectID(_generator.generate_with_prefix(Prefix.PROJECT))
