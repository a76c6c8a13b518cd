from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class HarnessConfig(BaseModel):
    """Settings for a harness session.

    Attributes:
        verbose: Print the build banner when a session is initialized.
        debug: With verbose, also print the arguments the session got.
        pass_glyph: Prefix for passing assertion lines.
        fail_glyph: Prefix for failing assertion lines.
        strict_record_fail: Count ``record_fail`` as a failure. Off by
            default, where ``record_fail`` increments the passed counter.
        log_file: Optional path of a debug log file.
    """

    model_config = ConfigDict(extra="forbid")

    verbose: bool = False
    debug: bool = False
    pass_glyph: str = "✓"
    fail_glyph: str = "✗"
    strict_record_fail: bool = False
    log_file: str | None = None

    @field_validator("pass_glyph", "fail_glyph")
    @classmethod
    def glyph_must_be_single_line(cls, v: str) -> str:
        if not v or "\n" in v:
            raise ValueError("glyph must be a non-empty single-line string")
        return v


def load_config(path: Path) -> HarnessConfig:
    """Load and validate a harness config from a YAML file.

    Raises FileNotFoundError for a missing file, yaml.YAMLError for
    malformed YAML and ValueError (including pydantic.ValidationError) for
    invalid content.
    """
    config_dir = path.parent.resolve()

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = HarnessConfig(**raw)

    # Resolve a relative log_file relative to the config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config
