from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from .types import ImportedModule, ImportedModuleBundle, LicenseCandidate, ModuleRecord, ProjectData

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when an input file cannot be turned into license records."""


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise SnapshotError(f"{path}: file is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"{path}: unable to parse JSON: {exc}") from exc


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _require(entry: dict, key: str, path: Path, where: str) -> str:
    value = entry.get(key)
    if value is None:
        raise SnapshotError(f"{path}: {where} is missing '{key}'")
    return str(value)


def _as_list(value: Any, path: Path, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotError(f"{path}: {where} must be a list")
    return value


def _as_object(value: Any, path: Path, where: str) -> dict:
    if not isinstance(value, dict):
        raise SnapshotError(f"{path}: {where} must be an object")
    return value


def _candidate(raw: dict) -> LicenseCandidate:
    return LicenseCandidate(
        name=_optional_str(raw.get("name")),
        url=_optional_str(raw.get("url")),
        project_url=_optional_str(raw.get("projectUrl")),
    )


def _module_record(raw: dict, path: Path, index: int) -> ModuleRecord:
    where = f"dependencies[{index}]"
    raw = _as_object(raw, path, where)
    return ModuleRecord(
        group=_require(raw, "group", path, where),
        name=_require(raw, "name", path, where),
        version=_optional_str(raw.get("version")),
        project_url=_optional_str(raw.get("projectUrl")),
        licenses=tuple(
            _candidate(_as_object(lic, path, f"{where}.licenses"))
            for lic in _as_list(raw.get("licenses"), path, f"{where}.licenses")
        ),
    )


def _imported_bundle(raw: dict, path: Path, index: int) -> ImportedModuleBundle:
    where = f"importedModules[{index}]"
    raw = _as_object(raw, path, where)
    modules = []
    for member_index, member in enumerate(_as_list(raw.get("modules"), path, f"{where}.modules")):
        member = _as_object(member, path, f"{where}.modules[{member_index}]")
        modules.append(
            ImportedModule(
                name=_require(member, "name", path, f"{where}.modules[{member_index}]"),
                version=_optional_str(member.get("version")),
                project_url=_optional_str(member.get("projectUrl")),
                license=_optional_str(member.get("license")),
                license_url=_optional_str(member.get("licenseUrl")),
            )
        )
    return ImportedModuleBundle(name=_require(raw, "name", path, where), modules=tuple(modules))


def load_snapshot(path: Path) -> ProjectData:
    """Load dependency records from a JSON snapshot file.

    The snapshot has a ``dependencies`` list of ``{group, name, version,
    projectUrl, licenses: [{name, url, projectUrl}]}`` objects and an
    ``importedModules`` list of ``{name, modules: [{name, version,
    projectUrl, license, licenseUrl}]}`` bundles. Both lists are optional.
    """

    data = _read_json(path)
    if not isinstance(data, dict):
        raise SnapshotError(f"{path}: snapshot must be a JSON object")

    dependencies = [
        _module_record(raw, path, index)
        for index, raw in enumerate(_as_list(data.get("dependencies"), path, "dependencies"))
    ]
    bundles = [
        _imported_bundle(raw, path, index)
        for index, raw in enumerate(_as_list(data.get("importedModules"), path, "importedModules"))
    ]
    logger.debug("Loaded %d dependencies and %d bundles from %s", len(dependencies), len(bundles), path)
    return ProjectData(all_dependencies=tuple(dependencies), imported_modules=tuple(bundles))


def _website(component: dict, path: Path, where: str) -> Optional[str]:
    references = _as_list(component.get("externalReferences"), path, f"{where}.externalReferences")
    for ref_index, reference in enumerate(references):
        reference = _as_object(reference, path, f"{where}.externalReferences[{ref_index}]")
        if reference.get("type") == "website" and reference.get("url"):
            return str(reference["url"])
    return None


def _component_licenses(component: dict, path: Path, where: str) -> list[LicenseCandidate]:
    candidates = []
    for lic_index, entry in enumerate(_as_list(component.get("licenses"), path, f"{where}.licenses")):
        entry_where = f"{where}.licenses[{lic_index}]"
        entry = _as_object(entry, path, entry_where)
        license_data = _as_object(entry.get("license") or {}, path, f"{entry_where}.license")
        name = license_data.get("id") or license_data.get("name") or entry.get("expression")
        if name or license_data.get("url"):
            candidates.append(LicenseCandidate(name=_optional_str(name), url=_optional_str(license_data.get("url"))))
    return candidates


def load_cyclonedx(path: Path) -> List[ModuleRecord]:
    data = _read_json(path)
    if not isinstance(data, dict) or str(data.get("bomFormat", "")).lower() != "cyclonedx":
        raise SnapshotError(f"{path}: not a CycloneDX SBOM")

    records: List[ModuleRecord] = []
    for index, comp in enumerate(_as_list(data.get("components"), path, "components")):
        where = f"components[{index}]"
        comp = _as_object(comp, path, where)
        records.append(
            ModuleRecord(
                group=str(comp.get("group") or ""),
                name=str(comp.get("name") or "unknown"),
                version=_optional_str(comp.get("version")),
                project_url=_website(comp, path, where),
                licenses=tuple(_component_licenses(comp, path, where)),
            )
        )
    logger.debug("Loaded %d components from CycloneDX SBOM %s", len(records), path)
    return records


def merge_snapshots(*snapshots: ProjectData) -> ProjectData:
    dependencies: list[ModuleRecord] = []
    bundles: list[ImportedModuleBundle] = []
    for snapshot in snapshots:
        dependencies.extend(snapshot.all_dependencies)
        bundles.extend(snapshot.imported_modules)
    return ProjectData(all_dependencies=tuple(dependencies), imported_modules=tuple(bundles))
