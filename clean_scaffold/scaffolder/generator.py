"""Feature scaffolding orchestrator.

Takes a feature name and generates the clean-architecture skeleton of one
Flutter feature (data / domain / presentation layers) under a selected
folder. Generation is idempotent: folders and files that already exist are
left alone, so re-running never clobbers manual edits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from clean_scaffold.config import Config
from clean_scaffold.state import variant_table
from clean_scaffold.utils import to_camel, to_pascal

from .templates import ARTIFACT_TEMPLATES, ArtifactKind, TemplateRenderer


# ---------------------------------------------------------------------------
# Folder layout
# ---------------------------------------------------------------------------

FOLDER_LAYOUT: tuple[str, ...] = (
    "data/data_sources",
    "data/models",
    "data/repositories",
    "domain/entities",
    "domain/repositories",
    "domain/usecases",
    "presentation/bloc",
    "presentation/page",
    "presentation/widgets",
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a folder or file cannot be created."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class PlannedFile(BaseModel):
    """One file the scaffolder will write, relative to the feature root."""

    kind: ArtifactKind
    relative_path: str
    content: str


class ScaffoldResult(BaseModel):
    """What a ``generate`` run created and what it found already present."""

    root: Path
    created_folders: list[Path] = Field(default_factory=list)
    skipped_folders: list[Path] = Field(default_factory=list)
    created_files: list[Path] = Field(default_factory=list)
    skipped_files: list[Path] = Field(default_factory=list)

    @property
    def changed(self) -> bool:
        """``True`` if this run created anything at all."""
        return bool(self.created_folders or self.created_files)

    def rows(self) -> list[tuple[str, str]]:
        """``(status, path)`` rows for the summary table, paths relative to ``root``."""
        rows: list[tuple[str, str]] = []
        for label, paths in (
            ("created", self.created_folders),
            ("exists", self.skipped_folders),
            ("created", self.created_files),
            ("skipped", self.skipped_files),
        ):
            rows.extend((label, str(p.relative_to(self.root))) for p in paths)
        return rows


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class Scaffolder:
    """Generates the folder and file skeleton of one feature.

    ``plan`` is pure: it derives every path and file body from the feature
    name. ``generate`` applies a plan to disk under
    ``<root_dir>/<feature_name>/``.
    """

    def __init__(
        self,
        config: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)

    # -- Public API --------------------------------------------------------

    def plan(self, feature_name: str) -> list[PlannedFile]:
        """Render every artifact for *feature_name* without touching disk.

        Raises:
            ValueError: If *feature_name* is empty.
        """
        _require_name(feature_name)
        context = self._build_context(feature_name)
        return [
            PlannedFile(
                kind=artifact.kind,
                relative_path=artifact.relative_path(feature_name),
                content=self.renderer.render_artifact(artifact, context),
            )
            for artifact in ARTIFACT_TEMPLATES
        ]

    def generate(self, root_dir: str | Path, feature_name: str) -> ScaffoldResult:
        """Create the feature skeleton under ``root_dir/feature_name``.

        Existing folders and files are skipped, never cleared or
        overwritten. Nothing already written is rolled back on failure.

        Args:
            root_dir: The selected folder; must already exist.
            feature_name: Non-empty feature name, used verbatim for the
                feature folder and file names.

        Returns:
            A ``ScaffoldResult`` listing created and skipped paths.

        Raises:
            ValueError: If *feature_name* is empty.
            ScaffoldError: If any folder or file cannot be created.
        """
        files = self.plan(feature_name)
        feature_root = Path(root_dir) / feature_name
        result = ScaffoldResult(root=feature_root)

        for folder in FOLDER_LAYOUT:
            self._create_folder(feature_root / folder, result)

        for planned in files:
            self._write_file(feature_root / planned.relative_path, planned.content, result)

        return result

    # -- Context building --------------------------------------------------

    def _build_context(self, feature_name: str) -> dict[str, Any]:
        """Build the Jinja2 template context for one feature."""
        pascal = to_pascal(feature_name)
        return {
            "file": feature_name,
            "name": pascal,
            "field": to_camel(pascal),
            "variants": variant_table(pascal),
        }

    # -- Filesystem --------------------------------------------------------

    def _create_folder(self, path: Path, result: ScaffoldResult) -> None:
        if path.is_dir():
            result.skipped_folders.append(path)
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ScaffoldError(path, exc.strerror or str(exc)) from exc
        result.created_folders.append(path)

    def _write_file(self, path: Path, content: str, result: ScaffoldResult) -> None:
        if path.exists():
            result.skipped_files.append(path)
            return
        try:
            path.write_text(content, encoding=self.config.encoding)
        except OSError as exc:
            raise ScaffoldError(path, exc.strerror or str(exc)) from exc
        result.created_files.append(path)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_name(feature_name: str) -> None:
    if not feature_name:
        raise ValueError("feature_name must not be empty")
