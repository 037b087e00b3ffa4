"""Jinja2 template rendering for feature scaffolding.

Each generated file is described by an ``ArtifactTemplate`` record (which
folder it lands in, which suffix its file name gets, which ``.j2`` body it is
rendered from). Every record goes through the same substitution routine,
``TemplateRenderer.render_artifact``, so the nine artifact kinds stay
consistent and can be tested independently of one another.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from pydantic import BaseModel, ConfigDict

from clean_scaffold.utils import to_camel, to_pascal


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Artifact records
# ---------------------------------------------------------------------------


class ArtifactKind(str, Enum):
    DATA_SOURCE = "data_source"
    DATA_SOURCE_IMPL = "data_source_impl"
    MODEL = "model"
    REPOSITORY_IMPL = "repository_impl"
    ENTITY = "entity"
    REPOSITORY = "repository"
    CUBIT = "cubit"
    STATE = "state"
    PAGE = "page"


class ArtifactTemplate(BaseModel):
    """Where one kind of artifact is written and what it is rendered from."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    folder: str
    suffix: str
    template: str

    def relative_path(self, feature_name: str) -> str:
        """``<folder>/<feature_name><suffix>``, relative to the feature root."""
        return f"{self.folder}/{feature_name}{self.suffix}"


ARTIFACT_TEMPLATES: tuple[ArtifactTemplate, ...] = (
    ArtifactTemplate(
        kind=ArtifactKind.DATA_SOURCE,
        folder="data/data_sources",
        suffix="_data_source.dart",
        template="data_source.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.DATA_SOURCE_IMPL,
        folder="data/data_sources",
        suffix="_data_source_impl.dart",
        template="data_source_impl.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.MODEL,
        folder="data/models",
        suffix="_model.dart",
        template="model.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.REPOSITORY_IMPL,
        folder="data/repositories",
        suffix="_repository_impl.dart",
        template="repository_impl.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.ENTITY,
        folder="domain/entities",
        suffix=".dart",
        template="entity.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.REPOSITORY,
        folder="domain/repositories",
        suffix="_repository.dart",
        template="repository.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.CUBIT,
        folder="presentation/bloc",
        suffix="_cubit.dart",
        template="cubit.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.STATE,
        folder="presentation/bloc",
        suffix="_state.dart",
        template="state.dart.j2",
    ),
    ArtifactTemplate(
        kind=ArtifactKind.PAGE,
        folder="presentation/page",
        suffix="_page.dart",
        template="page.dart.j2",
    ),
)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Dart artifact templates.

    Template bodies are ``.j2`` files under a configurable directory (the
    packaged ``templates/`` folder by default). A replacement directory must
    provide every template named in ``ARTIFACT_TEMPLATES``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["pascal_case"] = to_pascal
        self.env.filters["camel_case"] = to_camel

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_artifact(
        self, artifact: ArtifactTemplate, context: dict[str, Any]
    ) -> str:
        """Render the body of *artifact* for one feature context."""
        return self.render(artifact.template, {**context, "kind": artifact.kind.value})

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )
