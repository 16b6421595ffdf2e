from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .types import ReportMode

DEFAULT_FILE_NAME = "index.json"
CONFIG_TABLE = "license-report"


class ConfigError(ValueError):
    """Raised when a report configuration file holds unusable values."""


@dataclass
class ReportConfig:
    """Where and how a JSON license report is written."""

    output_dir: Path
    file_name: str = DEFAULT_FILE_NAME
    only_one_license_per_module: bool = True

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / self.file_name

    @property
    def mode(self) -> ReportMode:
        return ReportMode.SINGLE_LICENSE if self.only_one_license_per_module else ReportMode.ALL_LICENSES

    def as_dict(self) -> dict:
        return {
            "output_dir": str(self.output_dir),
            "file_name": self.file_name,
            "only_one_license_per_module": self.only_one_license_per_module,
        }


def _expect(table: dict, key: str, kind: type, path: Path) -> Any:
    value = table.get(key)
    if value is not None and not isinstance(value, kind):
        raise ConfigError(f"{path}: '{key}' must be a {kind.__name__}, got {type(value).__name__}")
    return value


def load_config(
    path: Path,
    output_dir: Optional[Path] = None,
    file_name: Optional[str] = None,
    only_one_license_per_module: Optional[bool] = None,
) -> ReportConfig:
    """Read a report configuration from a TOML file.

    Settings are taken from ``[tool.license-report]`` when the file is a
    pyproject.toml, otherwise from the top-level table. Keyword arguments
    that are not ``None`` override what the file says. A relative
    ``output-dir`` is resolved against the file's directory.
    """

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path}: file is not valid UTF-8: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc

    tool = _expect(data, "tool", dict, path) or {}
    table = _expect(tool, CONFIG_TABLE, dict, path)
    if table is None:
        table = _expect(data, CONFIG_TABLE, dict, path)
    if table is None:
        table = data

    file_output_dir = _expect(table, "output-dir", str, path)
    file_file_name = _expect(table, "file-name", str, path)
    file_single = _expect(table, "only-one-license-per-module", bool, path)

    if output_dir is None:
        if not file_output_dir:
            raise ConfigError(f"{path}: 'output-dir' is required")
        output_dir = Path(file_output_dir)
        if not output_dir.is_absolute():
            output_dir = path.parent / output_dir

    return ReportConfig(
        output_dir=Path(output_dir),
        file_name=file_name or file_file_name or DEFAULT_FILE_NAME,
        only_one_license_per_module=(
            only_one_license_per_module
            if only_one_license_per_module is not None
            else (file_single if file_single is not None else True)
        ),
    )
