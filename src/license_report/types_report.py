from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .trimming import trim_and_remove_null_entries


class ReportMode(str, Enum):
    SINGLE_LICENSE = "single"
    ALL_LICENSES = "all"

    @classmethod
    def parse(cls, value: "ReportMode | str") -> "ReportMode":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for mode in cls:
            if mode.value == normalized or mode.name.lower() == normalized:
                return mode
        raise ValueError(f"Unknown report mode: {value}")


@dataclass(frozen=True)
class SingleLicenseInfo:
    url: Optional[str] = None
    license: Optional[str] = None
    license_url: Optional[str] = None


@dataclass(frozen=True)
class LicenseEntry:
    name: Optional[str] = None
    url: Optional[str] = None

    def as_dict(self) -> dict:
        return trim_and_remove_null_entries({"moduleLicense": self.name, "moduleLicenseUrl": self.url})


@dataclass(frozen=True)
class MultiLicenseInfo:
    module_urls: tuple[str, ...] = ()
    licenses: tuple[LicenseEntry, ...] = ()


@dataclass(frozen=True)
class SingleLicenseEntry:
    module_name: str
    module_url: Optional[str] = None
    module_version: Optional[str] = None
    module_license: Optional[str] = None
    module_license_url: Optional[str] = None

    def as_dict(self) -> dict:
        return trim_and_remove_null_entries(
            {
                "moduleName": self.module_name,
                "moduleUrl": self.module_url,
                "moduleVersion": self.module_version,
                "moduleLicense": self.module_license,
                "moduleLicenseUrl": self.module_license_url,
            }
        )


@dataclass(frozen=True)
class MultiLicenseEntry:
    module_name: str
    module_version: Optional[str] = None
    module_urls: tuple[str, ...] = ()
    module_licenses: tuple[LicenseEntry, ...] = ()

    def as_dict(self) -> dict:
        return trim_and_remove_null_entries(
            {
                "moduleName": self.module_name,
                "moduleVersion": self.module_version,
                "moduleUrls": list(self.module_urls),
                "moduleLicenses": [entry.as_dict() for entry in self.module_licenses],
            }
        )


# Imported bundle members carry exactly one license, so they share the
# single-license row shape.
ImportedModuleEntry = SingleLicenseEntry


@dataclass(frozen=True)
class BundleEntry:
    module_name: str
    dependencies: tuple[ImportedModuleEntry, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict:
        return trim_and_remove_null_entries(
            {
                "moduleName": self.module_name,
                "dependencies": [dep.as_dict() for dep in self.dependencies],
            }
        )
