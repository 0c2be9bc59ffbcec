import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.config.config_template import load_templated_yaml


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


def _load_default_config() -> ConfigData:
    config_path = Path(os.getenv("APP_CONFIG_FILE", "config.yaml"))
    if not config_path.is_file():
        logger.warning("Configuration file {} not found; using defaults", config_path)
        return ConfigData()
    return load_templated_yaml(config_path)


_default_context = AppContext(config=_load_default_config())

_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context and return the token to reset it."""
    return _app_context.set(context)


def _dump_explicitly_set(model: BaseModel) -> dict:
    """Dump only the fields that were explicitly set, at every nesting level.

    A nested model is included whole as soon as any of its fields was set, so
    the merge below can descend into it.
    """
    result = {}
    for field_name in model.__class__.model_fields:
        value = getattr(model, field_name)
        if isinstance(value, BaseModel):
            if _dump_explicitly_set(value) or field_name in model.model_fields_set:
                result[field_name] = _dump_explicitly_set(value) or value.model_dump()
        elif field_name in model.model_fields_set:
            result[field_name] = value
    return result


def _merge_dicts(base: dict, override: dict) -> dict:
    merged = base.copy()
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Overlay the explicitly set fields of ``override_config`` on ``base_config``."""
    merged = _merge_dicts(base_config.model_dump(), _dump_explicitly_set(override_config))
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None) -> Iterator[None]:
    """Temporarily override the application configuration.

    Only fields explicitly set on the override replace the current values;
    everything else is inherited from the enclosing context.

    Example:
        override = ConfigData()
        override.storage.image_dir = "/tmp/images"
        with with_context(override):
            assert get_config().storage.image_dir == "/tmp/images"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the current configuration entirely."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
