"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic_core import ValidationError

from catalog_api.runtime.config.config_data import ConfigData
from catalog_api.runtime.config.settings import EnvironmentVariables

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        else:
            var_name = var_expr
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    return _PLACEHOLDER.sub(replacer, text)


def substitute_config_values(value):
    """Resolve placeholders in every string of a parsed YAML document.

    Substitution happens after parsing, so comments are never expanded and a
    value may contain quotes or backslashes. A string that is a single
    placeholder resolving to ``""`` becomes None.
    """
    if isinstance(value, dict):
        return {key: substitute_config_values(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_config_values(item) for item in value]
    if isinstance(value, str):
        resolved = substitute_env_vars(value)
        if resolved == "" and _PLACEHOLDER.fullmatch(value):
            return None
        return resolved
    return value


def apply_environment_overrides(env_mode: str) -> None:
    """Copy ``<ENV_MODE>_NAME`` variables onto ``NAME``.

    ``TEST_DB_HOST=db`` becomes ``DB_HOST=db`` when running with
    ``APP_ENVIRONMENT=test``.
    """
    prefix = f"{env_mode.upper()}_"
    env_variables = [(var, value) for var, value in os.environ.items() if var.startswith(prefix)]
    if env_variables:
        logger.info("Applying environment-specific overrides: {}", [name for name, _ in env_variables])

    for var_name, var_value in env_variables:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Environment whose prefixed variables take precedence

    Returns:
        Parsed YAML with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing or the file is invalid
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    try:
        loaded = yaml.safe_load(content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    config_data = substitute_config_values(loaded.get("config") or {})

    try:
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return config


def load_config(env_vars: EnvironmentVariables | None = None) -> ConfigData:
    """Load the application configuration for the current process.

    Reads ``.env`` first, then the templated YAML file named by
    ``APP_CONFIG_FILE``. Without a config file the built-in defaults apply.
    """
    load_dotenv()
    env_vars = env_vars or EnvironmentVariables()

    config_path = Path(env_vars.config_file)
    if not config_path.is_file():
        logger.warning("Config file {} not found; using defaults", config_path)
        config = ConfigData()
        config.app.environment = env_vars.environment
        return config

    return load_templated_yaml(config_path, env_vars.environment)
