from __future__ import annotations

"""JSON license report assembly.

The report has two modes, one license per module and all licenses per
module. Single-license mode produces::

    {
      "dependencies": [
        {"moduleName": "group:name", "moduleUrl": "...", "moduleVersion": "...",
         "moduleLicense": "...", "moduleLicenseUrl": "..."}
      ],
      "importedModules": [
        {"moduleName": "bundle", "dependencies": [{"moduleName": "...", ...}]}
      ]
    }

All-licenses mode replaces the license columns of each dependency with
``moduleUrls`` (a list of strings) and ``moduleLicenses`` (a list of
``{"moduleLicense", "moduleLicenseUrl"}`` objects). Empty values are never
emitted, at any level.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from .config import DEFAULT_FILE_NAME, ReportConfig
from .rendering import (
    render_all_licenses_per_module,
    render_imported_modules,
    render_single_license_per_module,
)
from .trimming import trim_and_remove_null_entries
from .types import ProjectData, ReportMode

logger = logging.getLogger(__name__)

# Published reports carry the process umask, not NamedTemporaryFile's 0600.
_UMASK = os.umask(0)
os.umask(_UMASK)


def build_report(data: ProjectData, mode: ReportMode | str = ReportMode.SINGLE_LICENSE) -> dict:
    mode = ReportMode.parse(mode)
    if mode is ReportMode.SINGLE_LICENSE:
        dependencies = render_single_license_per_module(data.all_dependencies)
    else:
        dependencies = render_all_licenses_per_module(data.all_dependencies)

    return trim_and_remove_null_entries(
        {
            "dependencies": dependencies,
            "importedModules": render_imported_modules(data.imported_modules),
        }
    )


def render_json(data: ProjectData, mode: ReportMode | str = ReportMode.SINGLE_LICENSE) -> str:
    return json.dumps(build_report(data, mode), indent=2, ensure_ascii=False)


def write_report(output: str, destination: Path) -> Path:
    """Publish ``output`` at ``destination`` without exposing a partial file.

    The text goes to a temporary file next to the destination first and is
    then renamed into place. Any failure removes the temporary file and
    propagates.
    """

    destination.parent.mkdir(parents=True, exist_ok=True)
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(output)
        os.chmod(tmp_path, 0o666 & ~_UMASK)
        tmp_path.replace(destination)
    except BaseException:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise

    logger.debug("License report written to %s", destination)
    return destination


class JsonReportRenderer:
    """Render a project's license data to ``{output_dir}/{file_name}``.

    Instances keep only their construction parameters, so several renderers
    can run side by side for different destinations.
    """

    def __init__(self, file_name: str = DEFAULT_FILE_NAME, only_one_license_per_module: bool = True):
        self.file_name = file_name
        self.only_one_license_per_module = only_one_license_per_module

    @property
    def mode(self) -> ReportMode:
        return ReportMode.SINGLE_LICENSE if self.only_one_license_per_module else ReportMode.ALL_LICENSES

    @classmethod
    def from_config(cls, config: ReportConfig) -> "JsonReportRenderer":
        return cls(file_name=config.file_name, only_one_license_per_module=config.only_one_license_per_module)

    def render(self, data: ProjectData, config: ReportConfig) -> Path:
        logger.debug(
            "Rendering %d dependencies and %d imported bundles (%s mode)",
            len(data.all_dependencies),
            len(data.imported_modules),
            self.mode.value,
        )
        return write_report(render_json(data, self.mode), Path(config.output_dir) / self.file_name)
