import pytest

from license_report.types import ImportedModule, ModuleRecord, ProjectData, ReportMode


def test_module_name_joins_group_and_name():
    assert ModuleRecord(group="org.example", name="lib").module_name == "org.example:lib"
    assert ModuleRecord(group="", name="").module_name == ":"


def test_records_require_group_and_name():
    with pytest.raises(ValueError):
        ModuleRecord(group=None, name="lib")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        ImportedModule(name=None)  # type: ignore[arg-type]


def test_project_data_freezes_sequences():
    data = ProjectData(all_dependencies=[ModuleRecord(group="a", name="x")])
    assert isinstance(data.all_dependencies, tuple)
    assert data.imported_modules == ()


def test_report_mode_parse():
    assert ReportMode.parse("single") is ReportMode.SINGLE_LICENSE
    assert ReportMode.parse("ALL_LICENSES") is ReportMode.ALL_LICENSES
    assert ReportMode.parse(ReportMode.ALL_LICENSES) is ReportMode.ALL_LICENSES
    with pytest.raises(ValueError):
        ReportMode.parse("csv")
