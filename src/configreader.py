import os
import yaml
from typing import Optional
from domain.state import Settings
from libuniversal import ConfigKey, DEFAULT_LANG, Paths, TagLayout, app_base_dir

default_cfg = {
    ConfigKey.LANG.value: DEFAULT_LANG,
    ConfigKey.STYLE.value: None,
    ConfigKey.TAG_LAYOUT.value: TagLayout.LINEAR.value,
    ConfigKey.SPECIAL_TAGS.value: False,
    ConfigKey.DIR_ROOT.value: "",
}

def default_config_path() -> str:
    return os.path.join(app_base_dir(), Paths.CLIENT_CONFIG_FILE.value)

def get_config(path: Optional[str] = None) -> dict:
    cfg_path = path or default_config_path()

    # If config file doesn't exist, create it with default settings
    if not os.path.isfile(cfg_path):
        with open(cfg_path, 'w') as yaml_file:
            yaml.dump(default_cfg, yaml_file)

    try:
        with open(cfg_path) as f:
            cfg = yaml.load(f, Loader=yaml.FullLoader)
    except yaml.YAMLError as e:
        raise Exception(f"Error decoding YAML from config file {cfg_path}: {e}")

    if cfg is None:
        return dict(default_cfg)
    if not isinstance(cfg, dict):
        raise Exception(f"Config file {cfg_path} must hold a mapping, not {type(cfg).__name__}")

    merged = dict(default_cfg)
    merged.update(cfg)
    return merged

def parse_layout(value) -> TagLayout:
    try:
        return TagLayout(str(value).lower())
    except ValueError:
        return TagLayout.LINEAR

def parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)

def resolve_settings(cfg: dict, overrides: Optional[dict] = None) -> Settings:
    values = dict(default_cfg)
    values.update(cfg or {})
    for k, v in (overrides or {}).items():
        if v is not None:
            values[ConfigKey(k).value] = v

    return Settings(
        lang=values[ConfigKey.LANG.value] or DEFAULT_LANG,
        style=values[ConfigKey.STYLE.value] or None,
        tag_layout=parse_layout(values[ConfigKey.TAG_LAYOUT.value]),
        special_tags=parse_bool(values[ConfigKey.SPECIAL_TAGS.value]),
        dir_root=values[ConfigKey.DIR_ROOT.value] or "",
    )
