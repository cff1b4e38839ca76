import pytest
import yaml

from configreader import default_cfg, get_config, parse_bool, parse_layout, resolve_settings
from libuniversal import ConfigKey, TagLayout


def test_missing_config_is_created_with_defaults(tmp_path):
    path = tmp_path / "cleantime-config.yaml"
    cfg = get_config(str(path))

    assert path.is_file()
    assert cfg == default_cfg
    with open(path) as f:
        assert yaml.safe_load(f) == default_cfg


def test_config_values_are_read(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("lang: en\ntag_layout: tabular\nspecial_tags: true\ndir_root: /srv/nacc\n")

    settings = resolve_settings(get_config(str(path)))

    assert settings.tag_layout == TagLayout.TABULAR
    assert settings.special_tags is True
    assert settings.dir_root == "/srv/nacc"
    assert settings.style is None


def test_empty_config_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert get_config(str(path)) == default_cfg


def test_broken_config_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("lang: [en\n")
    with pytest.raises(Exception, match="broken.yaml"):
        get_config(str(path))


def test_non_mapping_config_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- en\n- fr\n")
    with pytest.raises(Exception, match="mapping"):
        get_config(str(path))


def test_overrides_win_and_none_is_ignored():
    cfg = {"lang": "en", "tag_layout": "tabular", "special_tags": False, "style": "dark"}
    overrides = {
        ConfigKey.TAG_LAYOUT: "linear",
        ConfigKey.SPECIAL_TAGS: True,
        ConfigKey.STYLE: None,
        "dir_root": "tags",
    }

    settings = resolve_settings(cfg, overrides)

    assert settings.tag_layout == TagLayout.LINEAR
    assert settings.special_tags is True
    assert settings.style == "dark"
    assert settings.dir_root == "tags"


def test_layout_and_bool_parsing():
    assert parse_layout("TABULAR") == TagLayout.TABULAR
    assert parse_layout("grid") == TagLayout.LINEAR
    assert parse_layout(None) == TagLayout.LINEAR
    assert parse_bool("false") is False
    assert parse_bool("Yes") is True
    assert parse_bool(0) is False
    assert parse_bool(1) is True
