from __future__ import annotations

"""Shared data structures for license reporting.

Input records live in ``types_modules`` and report rows in ``types_report``;
this module re-exports both so callers have one stable import path.
"""

from .types_modules import ImportedModule, ImportedModuleBundle, LicenseCandidate, ModuleRecord, ProjectData
from .types_report import (
    BundleEntry,
    ImportedModuleEntry,
    LicenseEntry,
    MultiLicenseEntry,
    MultiLicenseInfo,
    ReportMode,
    SingleLicenseEntry,
    SingleLicenseInfo,
)

__all__ = [
    "BundleEntry",
    "ImportedModule",
    "ImportedModuleBundle",
    "ImportedModuleEntry",
    "LicenseCandidate",
    "LicenseEntry",
    "ModuleRecord",
    "MultiLicenseEntry",
    "MultiLicenseInfo",
    "ProjectData",
    "ReportMode",
    "SingleLicenseEntry",
    "SingleLicenseInfo",
]
