"""
Design documents
In-memory model, interchange codec and project files
"""

from .models import CANVAS_PRESETS, Document, WidgetInstance, create_widget
from .codec import decode_document, dumps, encode_document, loads
from .project import (
    Project,
    decode_project,
    dumps_project,
    encode_project,
    import_project,
    loads_project,
    project_filename,
)

__all__ = [
    "CANVAS_PRESETS",
    "Document",
    "WidgetInstance",
    "create_widget",
    "decode_document",
    "dumps",
    "encode_document",
    "loads",
    "Project",
    "decode_project",
    "dumps_project",
    "encode_project",
    "import_project",
    "loads_project",
    "project_filename",
]
