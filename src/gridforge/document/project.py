"""Project files (.xcc): a document plus name, description and timestamps."""

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from gridforge.core import DocumentFormatError, extract_json, get_logger, get_settings, safe_json_dumps
from gridforge.core.id import new_project_id
from .codec import decode_document, to_plain
from .models import Document

logger = get_logger(__name__)

PROJECT_VERSION = "1.0.0"
PROJECT_EXTENSION = ".xcc"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class Project(BaseModel):
    """A named design."""

    id: str = Field(default_factory=new_project_id)
    name: str = Field(..., min_length=1)
    description: str = ""
    title: str | None = None
    document: Document = Field(default_factory=Document)
    created: str = Field(default_factory=_now)
    modified: str = Field(default_factory=_now)
    version: str = PROJECT_VERSION

    def touch(self) -> None:
        """Mark the project modified now."""
        self.modified = _now()


def encode_project(project: Project) -> dict[str, Any]:
    document = project.document
    return {
        "id": project.id,
        "name": project.name,
        "framework": document.dialect.value,
        "description": project.description,
        "elements": [
            {
                "id": widget.id,
                "type": widget.type_name,
                "props": to_plain(widget.properties),
                "children": list(widget.children),
            }
            for widget in document.widgets.values()
        ],
        "properties": {
            "width": document.canvas_width,
            "height": document.canvas_height,
            "title": project.title or project.name,
        },
        "created": project.created,
        "modified": project.modified,
        "version": project.version,
    }


def decode_project(data: dict[str, Any]) -> Project:
    """
    Rebuild a Project from project-file data.

    Raises:
        DocumentFormatError: If name or framework is missing, or the body is malformed
        UnknownWidgetType: If a widget type is unknown
    """
    if not isinstance(data, dict) or not data.get("name") or not data.get("framework"):
        logger.error("invalid_project")
        raise DocumentFormatError("Invalid project data: 'name' and 'framework' are required")

    document = decode_document(data)
    properties = data.get("properties") if isinstance(data.get("properties"), dict) else {}
    fields = {
        "id": data.get("id"),
        "name": data["name"],
        "description": data.get("description"),
        "title": properties.get("title"),
        "created": data.get("created"),
        "modified": data.get("modified"),
        "version": data.get("version"),
    }
    return Project(document=document, **{k: v for k, v in fields.items() if v is not None})


def import_project(data: dict[str, Any]) -> Project:
    """Decode a shared project as a new one: fresh id and timestamps, marked imported."""
    project = decode_project(data)
    now = _now()
    imported = project.model_copy(
        update={
            "id": new_project_id(),
            "name": f"{project.name} (Imported)",
            "created": now,
            "modified": now,
        }
    )
    logger.info("project_imported", id=imported.id, widgets=len(imported.document.widgets))
    return imported


def dumps_project(project: Project, indent: int | None = None) -> str:
    if indent is None:
        indent = get_settings().json_indent
    return safe_json_dumps(encode_project(project), indent=indent)


def loads_project(text: str) -> Project:
    return decode_project(extract_json(text))


def project_filename(name: str) -> str:
    """``My App!`` -> ``my_app_.xcc``"""
    return re.sub(r"[^a-z0-9]", "_", name, flags=re.IGNORECASE).lower() + PROJECT_EXTENSION
