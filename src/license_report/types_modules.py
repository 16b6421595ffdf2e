from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LicenseCandidate:
    name: Optional[str] = None
    url: Optional[str] = None
    project_url: Optional[str] = None


@dataclass(frozen=True)
class ModuleRecord:
    """One resolved dependency as handed over by the dependency scan.

    A module may carry several license candidates when its metadata is
    ambiguous or it is multi-licensed. Group and name may be empty strings
    but must be present.
    """

    group: str
    name: str
    version: Optional[str] = None
    project_url: Optional[str] = None
    licenses: tuple[LicenseCandidate, ...] = ()

    def __post_init__(self) -> None:
        if self.group is None or self.name is None:
            raise ValueError("ModuleRecord requires both group and name")
        object.__setattr__(self, "licenses", tuple(self.licenses))

    @property
    def module_name(self) -> str:
        return f"{self.group}:{self.name}"


@dataclass(frozen=True)
class ImportedModule:
    name: str
    version: Optional[str] = None
    project_url: Optional[str] = None
    license: Optional[str] = None
    license_url: Optional[str] = None

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValueError("ImportedModule requires a name")


@dataclass(frozen=True)
class ImportedModuleBundle:
    name: str
    modules: tuple[ImportedModule, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "modules", tuple(self.modules))


@dataclass(frozen=True)
class ProjectData:
    all_dependencies: tuple[ModuleRecord, ...] = field(default_factory=tuple)
    imported_modules: tuple[ImportedModuleBundle, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "all_dependencies", tuple(self.all_dependencies))
        object.__setattr__(self, "imported_modules", tuple(self.imported_modules))
