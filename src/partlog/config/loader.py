"""
Cargador de configuración con deep merge.

Orden de precedencia (de menor a mayor):
1. Defaults (definidos en los schemas Pydantic)
2. Archivo YAML
3. Variables de entorno
4. Argumentos CLI
"""

import os
from pathlib import Path
from typing import Any

import yaml

from .schema import AppConfig


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge recursivo de diccionarios. ``override`` gana en conflictos de hojas.

    Example:
        >>> deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"b": 99}, "d": 4})
        {'a': {'b': 99, 'c': 2}, 'd': 4}
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_config(config_path: Path | None) -> dict[str, Any]:
    """Carga configuración desde archivo YAML, o dict vacío si no hay path.

    Raises:
        FileNotFoundError: Si ``config_path`` no existe.
    """
    if not config_path:
        return {}

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
        return data if data else {}


def load_env_overrides() -> dict[str, Any]:
    """Carga overrides desde variables de entorno.

    Variables soportadas:
        PARTLOG_LOG_LEVEL: sobreescribe logging.root.level
        PARTLOG_LOG_FILE: sobreescribe logging.root.file
        PARTLOG_DATA_DIR: sobreescribe data_dir
    """
    overrides: dict[str, Any] = {}

    if log_level := os.environ.get("PARTLOG_LOG_LEVEL"):
        overrides.setdefault("logging", {}).setdefault("root", {})["level"] = log_level.lower()

    if log_file := os.environ.get("PARTLOG_LOG_FILE"):
        overrides.setdefault("logging", {}).setdefault("root", {})["file"] = log_file

    if data_dir := os.environ.get("PARTLOG_DATA_DIR"):
        overrides["data_dir"] = data_dir

    return overrides


def apply_cli_overrides(config_dict: dict[str, Any], cli_args: dict[str, Any]) -> dict[str, Any]:
    """Aplica overrides desde argumentos CLI."""
    overrides: dict[str, Any] = {}

    if cli_args.get("log_level"):
        overrides.setdefault("logging", {}).setdefault("root", {})["level"] = cli_args["log_level"]

    if cli_args.get("log_file"):
        overrides.setdefault("logging", {}).setdefault("root", {})["file"] = cli_args["log_file"]

    if cli_args.get("data_dir"):
        overrides["data_dir"] = cli_args["data_dir"]

    return deep_merge(config_dict, overrides)


def load_config(
    config_path: Path | None = None,
    cli_args: dict[str, Any] | None = None,
) -> AppConfig:
    """Carga y valida la configuración completa.

    Raises:
        FileNotFoundError: Si config_path no existe
        ValidationError: Si la configuración final no es válida
    """
    cli_args = cli_args or {}

    yaml_config = load_yaml_config(config_path)
    merged = deep_merge(yaml_config, load_env_overrides())
    merged = apply_cli_overrides(merged, cli_args)

    return AppConfig(**merged)
