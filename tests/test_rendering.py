from license_report.rendering import (
    render_all_licenses_per_module,
    render_imported_modules,
    render_single_license_per_module,
)
from license_report.types import ImportedModule, ImportedModuleBundle, LicenseCandidate, ModuleRecord


def test_single_mode_sorts_and_trims():
    deps = [
        ModuleRecord(group="a", name="x", version="1.0"),
        ModuleRecord(group="a", name="w", version="2.0", licenses=(LicenseCandidate("MIT", "http://u"),)),
    ]

    rows = render_single_license_per_module(deps)

    assert rows == [
        {"moduleName": "a:w", "moduleVersion": "2.0", "moduleLicense": "MIT", "moduleLicenseUrl": "http://u"},
        {"moduleName": "a:x", "moduleVersion": "1.0"},
    ]


def test_single_mode_strips_license_whitespace():
    deps = [ModuleRecord(group="a", name="x", licenses=(LicenseCandidate("  MIT  ", None),))]
    assert render_single_license_per_module(deps)[0]["moduleLicense"] == "MIT"


def test_single_mode_key_order():
    deps = [
        ModuleRecord(
            group="g",
            name="n",
            version="1",
            project_url="http://p",
            licenses=(LicenseCandidate("MIT", "http://l"),),
        )
    ]
    assert list(render_single_license_per_module(deps)[0]) == [
        "moduleName",
        "moduleUrl",
        "moduleVersion",
        "moduleLicense",
        "moduleLicenseUrl",
    ]


def test_sort_is_stable_for_duplicate_names():
    deps = [
        ModuleRecord(group="b", name="y", version="2"),
        ModuleRecord(group="a", name="z", version="1"),
        ModuleRecord(group="b", name="y", version="1"),
    ]

    versions = [(row["moduleName"], row["moduleVersion"]) for row in render_single_license_per_module(deps)]

    assert versions == [("a:z", "1"), ("b:y", "2"), ("b:y", "1")]


def test_sort_uses_code_point_order():
    deps = [ModuleRecord(group="a", name=name) for name in ["b", "B", "a", "_"]]
    names = [row["moduleName"] for row in render_single_license_per_module(deps)]
    assert names == ["a:B", "a:_", "a:a", "a:b"]


def test_all_mode_lists_unique_licenses():
    deps = [
        ModuleRecord(
            group="a",
            name="x",
            version="1.0",
            project_url="http://home",
            licenses=(
                LicenseCandidate("MIT", "u1"),
                LicenseCandidate("MIT", "u1"),
                LicenseCandidate("Apache-2.0", "u2"),
            ),
        )
    ]

    rows = render_all_licenses_per_module(deps)

    assert rows == [
        {
            "moduleName": "a:x",
            "moduleVersion": "1.0",
            "moduleUrls": ["http://home"],
            "moduleLicenses": [
                {"moduleLicense": "MIT", "moduleLicenseUrl": "u1"},
                {"moduleLicense": "Apache-2.0", "moduleLicenseUrl": "u2"},
            ],
        }
    ]


def test_all_mode_omits_empty_collections():
    rows = render_all_licenses_per_module([ModuleRecord(group="a", name="x")])
    assert rows == [{"moduleName": "a:x"}]


def test_empty_bundle_renders_name_only():
    assert render_imported_modules([ImportedModuleBundle(name="vendor")]) == [{"moduleName": "vendor"}]


def test_bundles_keep_member_order_and_sort_by_name():
    bundles = [
        ImportedModuleBundle(
            name="zeta",
            modules=(
                ImportedModule(name="second", version="2", license="MIT", license_url=" http://mit "),
                ImportedModule(name="first", project_url="http://first"),
            ),
        ),
        ImportedModuleBundle(name="alpha", modules=(ImportedModule(name="only", license=""),)),
    ]

    rows = render_imported_modules(bundles)

    assert rows == [
        {"moduleName": "alpha", "dependencies": [{"moduleName": "only"}]},
        {
            "moduleName": "zeta",
            "dependencies": [
                {"moduleName": "second", "moduleVersion": "2", "moduleLicense": "MIT", "moduleLicenseUrl": "http://mit"},
                {"moduleName": "first", "moduleUrl": "http://first"},
            ],
        },
    ]
