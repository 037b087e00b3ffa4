"""clean-scaffold configuration.

Typed configuration for the scaffolder and its command-line front end. All
settings are Pydantic v2 models so they are validated at construction time
and serialise to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class PromptConfig(BaseModel):
    """Wording of the interactive feature-name prompt."""

    message: str = Field(default="Enter feature name to create (snake_case)")
    placeholder: str = Field(
        default="clean_arch", description="Example value shown next to the prompt"
    )


class Config(BaseModel):
    """Global clean-scaffold configuration.

    Instances are created once by the CLI entry point (from a JSON file or
    the environment) and handed to the ``Scaffolder``.
    """

    template_dir: Path | None = Field(
        default=None,
        description="Directory holding replacement .j2 template bodies",
    )
    encoding: str = Field(default="utf-8", min_length=1)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
    verbose: bool = Field(default=False)

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        Raises:
            OSError: If the file cannot be read.
            pydantic.ValidationError: If the content is not a valid config.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CLEAN_SCAFFOLD_TEMPLATE_DIR, CLEAN_SCAFFOLD_ENCODING,
            CLEAN_SCAFFOLD_PLACEHOLDER, CLEAN_SCAFFOLD_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CLEAN_SCAFFOLD_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CLEAN_SCAFFOLD_TEMPLATE_DIR"])
        if os.environ.get("CLEAN_SCAFFOLD_ENCODING"):
            kwargs["encoding"] = os.environ["CLEAN_SCAFFOLD_ENCODING"]
        if os.environ.get("CLEAN_SCAFFOLD_PLACEHOLDER"):
            kwargs["prompt"] = PromptConfig(
                placeholder=os.environ["CLEAN_SCAFFOLD_PLACEHOLDER"]
            )

        verbose = os.environ.get("CLEAN_SCAFFOLD_VERBOSE", "")
        kwargs["verbose"] = verbose.strip().lower() in _TRUTHY

        return cls(**kwargs)
