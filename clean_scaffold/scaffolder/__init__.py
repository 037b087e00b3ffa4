"""Feature scaffolder: folder layout, artifact templates and idempotent writes."""

from clean_scaffold.scaffolder.generator import (
    FOLDER_LAYOUT,
    PlannedFile,
    ScaffoldError,
    ScaffoldResult,
    Scaffolder,
)
from clean_scaffold.scaffolder.templates import (
    ARTIFACT_TEMPLATES,
    ArtifactKind,
    ArtifactTemplate,
    TemplateRenderer,
)

__all__ = [
    "ARTIFACT_TEMPLATES",
    "ArtifactKind",
    "ArtifactTemplate",
    "FOLDER_LAYOUT",
    "PlannedFile",
    "ScaffoldError",
    "ScaffoldResult",
    "Scaffolder",
    "TemplateRenderer",
]
