from __future__ import annotations

import logging
from typing import Iterable

from .license_selector import select_all, select_single
from .types import (
    BundleEntry,
    ImportedModule,
    ImportedModuleBundle,
    ImportedModuleEntry,
    ModuleRecord,
    MultiLicenseEntry,
    SingleLicenseEntry,
)

logger = logging.getLogger(__name__)


def _by_module_name(row: dict) -> str:
    return row.get("moduleName", "")


def sort_rows(rows: Iterable[dict]) -> list[dict]:
    """Sort report rows by moduleName, keeping input order among equal names."""

    return sorted(rows, key=_by_module_name)


def single_license_entry(module: ModuleRecord) -> SingleLicenseEntry:
    info = select_single(module)
    return SingleLicenseEntry(
        module_name=module.module_name,
        module_url=info.url,
        module_version=module.version,
        module_license=info.license,
        module_license_url=info.license_url,
    )


def multi_license_entry(module: ModuleRecord) -> MultiLicenseEntry:
    info = select_all(module)
    return MultiLicenseEntry(
        module_name=module.module_name,
        module_version=module.version,
        module_urls=info.module_urls,
        module_licenses=info.licenses,
    )


def render_single_license_per_module(dependencies: Iterable[ModuleRecord]) -> list[dict]:
    rows = [single_license_entry(module).as_dict() for module in dependencies]
    logger.debug("Rendered %d dependencies with one license each", len(rows))
    return sort_rows(rows)


def render_all_licenses_per_module(dependencies: Iterable[ModuleRecord]) -> list[dict]:
    rows = [multi_license_entry(module).as_dict() for module in dependencies]
    logger.debug("Rendered %d dependencies with all licenses", len(rows))
    return sort_rows(rows)


def imported_module_entry(module: ImportedModule) -> ImportedModuleEntry:
    return ImportedModuleEntry(
        module_name=module.name,
        module_url=module.project_url,
        module_version=module.version,
        module_license=module.license,
        module_license_url=module.license_url,
    )


def render_imported_modules(bundles: Iterable[ImportedModuleBundle]) -> list[dict]:
    rows = [
        BundleEntry(
            module_name=bundle.name,
            dependencies=tuple(imported_module_entry(module) for module in bundle.modules),
        ).as_dict()
        for bundle in bundles
    ]
    logger.debug("Rendered %d imported module bundles", len(rows))
    return sort_rows(rows)
