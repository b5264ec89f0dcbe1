"""Project entities."""

from __future__ import annotations

from gerlib.core.models.base import GerritModel
from gerlib.core.models.changes import WebLinkInfo
from gerlib.core.models.enums import ProjectStatus


class LabelTypeInfo(GerritModel):
    values: dict[str, str] | None = None
    default_value: int | None = None


class ProjectInfo(GerritModel):
    """Information about a project.

    ``name`` is omitted when the project is returned in a map keyed by
    its name.  ``parent`` may read ``?-<n>`` when the parent is not
    visible to the caller.
    """

    id: str
    name: str | None = None
    parent: str | None = None
    description: str | None = None
    state: ProjectStatus | None = None
    branches: dict[str, str] | None = None
    labels: dict[str, LabelTypeInfo] | None = None
    web_links: list[WebLinkInfo] | None = None
