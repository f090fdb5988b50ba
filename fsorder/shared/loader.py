"""
Shared configuration loading and validation helpers.

Provides:
 - `load_config`: basic YAML loader
 - `load_logging_config`: the top-level `logging` section
 - `load_task_config`: validated configuration for a given task
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from fsorder.base.file_io import read_yaml


ConfigDict = Dict[str, Any]

DEFAULT_CONFIG_FILENAME = "fsorder.yaml"
LOGGING_SECTION_KEY = "logging"
TASKS_SECTION_KEY = "tasks"


TASK_SCHEMAS: Dict[str, Dict[str, Iterable[str]]] = {
    "list": {
        "required": ["roots"],
        "optional": ["extensions", "full_paths", "format", "output"],
    },
}

FIELD_ALIASES = {
    "root": "roots",
    "ext": "extensions",
    "exts": "extensions",
}

SINGLE_PATH_FIELDS = {"output"}
MULTI_PATH_FIELDS = {"roots"}
STRING_LIST_FIELDS = {"extensions"}
BOOLEAN_FIELDS = {"full_paths"}
CHOICE_FIELDS: Dict[str, frozenset[str]] = {"format": frozenset({"text", "json"})}
LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}


def load_config(path: str | Path | None) -> Mapping[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    data = read_yaml(cfg_path)
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration root must be a mapping in {cfg_path}")

    return data


def default_config_path(cwd: Path | None = None) -> Path | None:
    """Return ``./fsorder.yaml`` when it exists, else None."""
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_logging_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    if not config_path:
        return {}
    resolved_path = Path(config_path).expanduser()
    root = load_config(resolved_path)
    settings = _extract_logging_settings(root, resolved_path)
    return _anchor_log_dir(settings, resolved_path)


def load_task_config(task: str, config_path: str | Path | None = None) -> ConfigDict:
    if task not in TASK_SCHEMAS:
        raise ValueError(f"Unknown task '{task}'. Expected one of: {', '.join(sorted(TASK_SCHEMAS))}")

    resolved_path = _resolve_config_path(config_path)
    root_config = dict(load_config(resolved_path))
    task_config_raw = _extract_task_config(root_config, task, resolved_path)

    task_logging_override: Dict[str, Any] = {}
    if LOGGING_SECTION_KEY in task_config_raw:
        logging_payload = task_config_raw.pop(LOGGING_SECTION_KEY)
        if not isinstance(logging_payload, Mapping):
            raise ValueError(
                f"Task '{task}' logging section must be a mapping in {resolved_path}"
            )
        task_logging_override = dict(logging_payload)
        _validate_logging_keys(task_logging_override, f"Task '{task}' logging section", resolved_path)

    config = _apply_aliases(task_config_raw)

    schema = TASK_SCHEMAS[task]
    required = set(schema.get("required", []))
    optional = set(schema.get("optional", []))
    allowed_keys = required | optional

    missing = sorted(key for key in required if not config.get(key))
    if missing:
        raise ValueError(
            f"Configuration '{resolved_path}' missing required fields for task '{task}': {', '.join(missing)}"
        )

    unexpected = sorted(key for key in config if key not in allowed_keys)
    if unexpected:
        raise ValueError(
            f"Configuration '{resolved_path}' contains unsupported keys for task '{task}': {', '.join(unexpected)}"
        )

    base_dir = resolved_path.parent
    normalized: ConfigDict = {}
    for key, value in config.items():
        if key in SINGLE_PATH_FIELDS:
            normalized[key] = _normalize_single_path(value, base_dir)
        elif key in MULTI_PATH_FIELDS:
            normalized[key] = _normalize_multi_path(value, base_dir)
        elif key in STRING_LIST_FIELDS:
            normalized[key] = _normalize_string_list(value)
        elif key in BOOLEAN_FIELDS:
            normalized[key] = _coerce_bool(value, key, resolved_path)
        elif key in CHOICE_FIELDS:
            normalized[key] = _coerce_choice(value, key, resolved_path)
        else:
            normalized[key] = value

    normalized["__task__"] = task
    normalized["__config_path__"] = str(resolved_path)

    merged_logging = _extract_logging_settings(root_config, resolved_path)
    merged_logging.update(task_logging_override)
    merged_logging = _anchor_log_dir(merged_logging, resolved_path)
    if merged_logging:
        normalized["__logging__"] = merged_logging
    return normalized


def _apply_aliases(config: Mapping[str, Any]) -> ConfigDict:
    result: ConfigDict = {}
    for key, value in config.items():
        canonical = FIELD_ALIASES.get(key, key)
        result[canonical] = value
    return result


def _anchor(value: Any, base_dir: Path) -> Path:
    candidate = Path(str(value)).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _normalize_single_path(value: Any, base_dir: Path) -> str:
    if value is None:
        raise ValueError("Expected a path value, received None")
    return str(_anchor(value, base_dir))


def _normalize_multi_path(value: Any, base_dir: Path) -> List[str]:
    if value is None:
        raise ValueError("Expected a list of paths, received None")
    values = value if isinstance(value, (list, tuple)) else [value]
    if not values:
        raise ValueError("Expected at least one path entry")
    return [str(_anchor(item, base_dir)) for item in values]


def _normalize_string_list(value: Any) -> List[str]:
    if value is None:
        return []
    items: List[str] = []
    raw_items = value if isinstance(value, (list, tuple)) else [value]
    for item in raw_items:
        items.extend(token.strip() for token in str(item).split(",") if token.strip())
    return items


def _coerce_bool(value: Any, field: str, config_path: Path) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in YES_VALUES:
        return True
    if text in NO_VALUES:
        return False
    raise ValueError(
        f"Configuration '{config_path}' field '{field}' must be a boolean."
    )


def _coerce_choice(value: Any, field: str, config_path: Path) -> str:
    choices = CHOICE_FIELDS[field]
    text = str(value).strip().lower()
    if text not in choices:
        raise ValueError(
            f"Configuration '{config_path}' field '{field}' must be one of: {', '.join(sorted(choices))}"
        )
    return text


def _resolve_config_path(config_path: str | Path | None) -> Path:
    if config_path:
        return Path(config_path).expanduser()

    candidate = default_config_path()
    if candidate is None:
        raise FileNotFoundError(
            f"No configuration path provided and {DEFAULT_CONFIG_FILENAME} not found in {Path.cwd()}"
        )
    return candidate


def _extract_task_config(root: Mapping[str, Any], task: str, config_path: Path) -> ConfigDict:
    if TASKS_SECTION_KEY not in root:
        raise ValueError(f"Configuration '{config_path}' has no '{TASKS_SECTION_KEY}' section")

    tasks_section = root.get(TASKS_SECTION_KEY) or {}
    if not isinstance(tasks_section, Mapping):
        raise ValueError(f"'{TASKS_SECTION_KEY}' section must be a mapping in {config_path}")
    if task not in tasks_section:
        raise ValueError(
            f"Configuration '{config_path}' missing task '{task}' under '{TASKS_SECTION_KEY}' section"
        )
    task_payload = tasks_section[task]
    if not isinstance(task_payload, Mapping):
        raise ValueError(f"Task '{task}' entry must be a mapping in {config_path}")
    return dict(task_payload)


def _validate_logging_keys(section: Mapping[str, Any], label: str, config_path: Path) -> None:
    invalid = [key for key in section if key not in LOGGING_ALLOWED_KEYS]
    if invalid:
        invalid_keys = ", ".join(sorted(invalid))
        raise ValueError(f"{label} contains unsupported keys in {config_path}: {invalid_keys}")


def _extract_logging_settings(root: Mapping[str, Any], config_path: Path) -> Dict[str, Any]:
    section = root.get(LOGGING_SECTION_KEY) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"'{LOGGING_SECTION_KEY}' section must be a mapping in {config_path}")
    _validate_logging_keys(section, f"'{LOGGING_SECTION_KEY}' section", config_path)
    return dict(section)


def _anchor_log_dir(logging_cfg: Dict[str, Any], config_path: Path) -> Dict[str, Any]:
    cfg = dict(logging_cfg)
    log_dir_value = cfg.get("log_dir")
    if log_dir_value:
        cfg["log_dir"] = str(_anchor(log_dir_value, config_path.parent))
    return cfg
