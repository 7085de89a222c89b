import json
import logging

import pytest

from langtag.utils.mappings import get_iso_639_2_code, normalize_language_code


@pytest.mark.parametrize("raw, expected", [
    ("EN", "en"),
    ("  de ", "de"),
    ("pt-BR", "pt"),
    ("zh_TW", "zh"),
    ("zh-cn", "zh"),
    ("", ""),
    (None, ""),
])
def test_normalize_language_code(raw, expected):
    assert normalize_language_code(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("en", "eng"),
    ("EN", "eng"),
    (" fr ", "fre"),
    ("pt-BR", "por"),
    ("eng", "eng"),
    ("GER", "ger"),
])
def test_translates_after_normalizing(raw, expected):
    assert get_iso_639_2_code(raw) == expected


def test_unknown_uses_config_fallback(caplog):
    with caplog.at_level(logging.WARNING, logger="langtag"):
        assert get_iso_639_2_code("xx") == "und"
    assert "xx" in caplog.text


def test_empty_uses_fallback():
    assert get_iso_639_2_code("") == "und"
    assert get_iso_639_2_code(None, fallback="mul") == "mul"


def test_explicit_fallback_wins():
    assert get_iso_639_2_code("qq", fallback="zxx") == "zxx"


def test_keep_unknown_passes_code_through():
    assert get_iso_639_2_code("QQ", keep_unknown=True) == "qq"


def test_config_controls_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"tagging": {"fallback_tag": "mis", "keep_unknown": False}}))
    assert get_iso_639_2_code("qq") == "mis"

    isolated_config.write_text(json.dumps({"tagging": {"fallback_tag": "mis", "keep_unknown": True}}))
    assert get_iso_639_2_code("qq") == "qq"


def test_none_fallback_reads_configured_tag(isolated_config):
    assert get_iso_639_2_code("qq", fallback=None) == "und"

    isolated_config.write_text(json.dumps({"tagging": {"fallback_tag": "mis", "keep_unknown": False}}))
    assert get_iso_639_2_code("qq", fallback=None) == "mis"


def test_pass_through_needs_keep_unknown():
    assert get_iso_639_2_code("qq", fallback=None, keep_unknown=True) == "qq"
    assert get_iso_639_2_code("qq", fallback=None, keep_unknown=False) == "und"
