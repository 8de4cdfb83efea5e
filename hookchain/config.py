"""Project configuration for hookchain.

Settings live in the ``[tool.hookchain]`` table of a project's
``pyproject.toml``::

    [tool.hookchain]
    default_priority = 50
"""

import tomllib
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError

from hookchain.callbacks import DEFAULT_PRIORITY
from hookchain.exceptions import ConfigError

log = logger.bind(source=__name__)


class HookchainConfig(BaseModel):
    """Validated ``[tool.hookchain]`` table.

    Attributes:
        default_priority: Priority for callbacks registered without one.

    Raises:
        ConfigError: If fields fail pydantic validation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    default_priority: int = DEFAULT_PRIORITY

    def __init__(self, **data: Any) -> None:
        """Wrap pydantic ValidationError into ConfigError."""
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def load_config(pyproject_path: Path) -> HookchainConfig:
    """Read ``[tool.hookchain]`` from a ``pyproject.toml`` file.

    A missing table yields the defaults.

    Args:
        pyproject_path: Path to the ``pyproject.toml`` file.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If the table holds unknown keys or invalid values.
    """
    with open(pyproject_path, "rb") as fh:
        document = tomllib.load(fh)

    table = document.get("tool", {}).get("hookchain", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.hookchain] in {pyproject_path} must be a table")
    if not table:
        log.debug("No [tool.hookchain] table in {}", pyproject_path)
    return HookchainConfig(**table)
