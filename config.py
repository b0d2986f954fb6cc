from __future__ import annotations

import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".kanban_md_config.yaml"
DEFAULT_REGISTRY_PATH = Path.home() / ".kanban_md" / "projects.yaml"
DEFAULT_THEME = "dark-olive"

logger = logging.getLogger("kanban_md.config")


def config_path() -> Path:
    override = os.getenv("KANBAN_MD_CONFIG")
    return Path(override).expanduser() if override else USER_CONFIG_PATH


def _load_config() -> Dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.debug("Ignoring unreadable user config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    path = config_path()
    if not data:
        if path.exists():
            path.unlink()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_user_lang() -> str:
    return str(_load_config().get("lang", "")).strip()


def set_user_lang(value: str) -> None:
    _set_value("lang", value)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "")).strip() or DEFAULT_THEME


def set_user_theme(value: str) -> None:
    _set_value("theme", value)


def get_default_column() -> str:
    return str(_load_config().get("default_column", "")).strip()


def get_registry_path() -> Path:
    raw = str(_load_config().get("projects_registry", "")).strip()
    return Path(raw).expanduser() if raw else DEFAULT_REGISTRY_PATH
