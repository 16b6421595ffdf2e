from __future__ import annotations

from typing import Iterable, Optional

from .types import LicenseEntry, ModuleRecord, MultiLicenseInfo, SingleLicenseInfo


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _unique(values: Iterable) -> list:
    seen = set()
    unique = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique


def select_single(module: ModuleRecord) -> SingleLicenseInfo:
    """Pick one representative license for a flat report row.

    The first candidate in declared order wins; other candidates are
    dropped. The module's own project URL takes precedence over the one
    attached to the chosen candidate.
    """

    if not module.licenses:
        return SingleLicenseInfo(url=module.project_url)

    chosen = module.licenses[0]
    return SingleLicenseInfo(
        url=_clean(module.project_url) or chosen.project_url,
        license=chosen.name,
        license_url=chosen.url,
    )


def select_all(module: ModuleRecord) -> MultiLicenseInfo:
    urls = [_clean(module.project_url)] + [_clean(c.project_url) for c in module.licenses]
    pairs = [(_clean(c.name), _clean(c.url)) for c in module.licenses]

    return MultiLicenseInfo(
        module_urls=tuple(_unique(url for url in urls if url)),
        licenses=tuple(
            LicenseEntry(name=name, url=url)
            for name, url in _unique(pairs)
            if name or url
        ),
    )
