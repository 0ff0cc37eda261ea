"""Site configuration: settings schema and mkweb.yaml loader"""

import os
from pathlib import Path, PurePosixPath
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


CONFIG_FILE = "mkweb.yaml"


class Settings(BaseModel):
    public_dir:    str  = Field(default="public",       description="Output subdirectory of the site root")
    assets_dir:    str  = Field(default="assets",       description="Static assets subdirectory, mirrored into public_dir")
    template_file: str  = Field(default="template.hbs", description="Page template, relative to the site root")
    converter:     Literal["markdown-it", "pandoc"] = Field(default="markdown-it", description="Markdown converter")
    pandoc_path:   str  = Field(default="pandoc",       description="pandoc executable for the pandoc converter")
    html_suffix:   bool = Field(default=False,          description="Write markdown outputs with a .html suffix")

    @field_validator("public_dir", "assets_dir")
    @classmethod
    def _subpath_of_root(cls, value: str) -> str:
        parts = _posix(value).parts
        if not parts or parts[0] == "/" or ".." in parts or Path(value).is_absolute():
            raise ValueError(f"{value!r} must be a relative path inside the site root")
        return value

    @model_validator(mode="after")
    def _distinct_dirs(self) -> "Settings":
        public, assets = _posix(self.public_dir), _posix(self.assets_dir)
        if public == assets:
            raise ValueError("public_dir and assets_dir must differ")
        # Either nested in the other would make the asset mirror copy into itself.
        if public.is_relative_to(assets) or assets.is_relative_to(public):
            raise ValueError("public_dir and assets_dir must not be nested in each other")
        return self


def _posix(value: str) -> PurePosixPath:
    return PurePosixPath(value.replace("\\", "/"))


def load_config(root: Path, overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from <root>/mkweb.yaml, then MKWEB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    path = Path(root) / CONFIG_FILE
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MKWEB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
