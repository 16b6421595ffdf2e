from license_report.trimming import is_empty, trim_and_remove_null_entries


def test_trim_drops_empty_values_and_strips_strings():
    trimmed = trim_and_remove_null_entries(
        {
            "moduleName": "  a:x  ",
            "moduleUrl": None,
            "moduleVersion": "",
            "moduleLicense": "   ",
            "moduleUrls": [],
            "moduleLicenses": [{"moduleLicense": "MIT"}],
            "flag": False,
            "count": 0,
        }
    )

    assert trimmed == {"moduleName": "a:x", "moduleLicenses": [{"moduleLicense": "MIT"}]}


def test_trim_keeps_non_string_values_unchanged():
    urls = ["http://a", "http://b"]
    trimmed = trim_and_remove_null_entries({"moduleUrls": urls, "count": 3})
    assert trimmed["moduleUrls"] is urls
    assert trimmed["count"] == 3


def test_trim_preserves_key_order():
    trimmed = trim_and_remove_null_entries({"b": "2", "a": "1", "c": None})
    assert list(trimmed) == ["b", "a"]


def test_is_empty_rule():
    assert is_empty(None)
    assert is_empty(" \t")
    assert is_empty({})
    assert not is_empty("x")
    assert not is_empty([""])
