"""Context-local access to the loaded configuration."""

from contextlib import contextmanager
from contextvars import ContextVar

from catalog_api.runtime.config.config_data import ConfigData
from catalog_api.runtime.config.config_template import load_config

_config: ContextVar[ConfigData] = ContextVar("config", default=load_config())


def get_config() -> ConfigData:
    """Return the configuration of the current context."""
    return _config.get()


@contextmanager
def override_config(**sections: dict):
    """Replace individual config fields for the duration of a block.

    Each keyword names a section of ``ConfigData`` and maps field names to
    new values; the result is validated like a loaded config file.

    Example:
        with override_config(database={"url": "sqlite:///catalog.db"}) as config:
            DbSessionService(config.database)
    """
    data = get_config().model_dump()
    for section, values in sections.items():
        if not isinstance(data.get(section), dict):
            raise ValueError(f"Unknown config section: {section}")
        data[section].update(values)

    token = _config.set(ConfigData.model_validate(data))
    try:
        yield _config.get()
    finally:
        _config.reset(token)
