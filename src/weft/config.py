"""Render configuration for weft.

A RenderConfig is built once, at startup, and passed explicitly to whatever
constructs generators, render factories and sinks. There is no global
registry: two runs with different configs can happen side by side.

Usage:
    config = RenderConfig(language="de", debug=True)
    factory = Factory(config)
    sinks = StringSinkFactory(config)

    # From a dictionary (framework integration)
    config = RenderConfig.from_dict({"language": "fr"})

    # From a TOML file, reading the [weft] table when present
    config = RenderConfig.from_toml("weft.toml")

"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from weft.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        language: Language code of the document being rendered
        output_directory: Root under which sink paths are addressed
        index_directory: Root for generated index data
        debug: Annotate rendered tags with the element they came from

    """

    language: str = "en"
    output_directory: str = "build/output"
    index_directory: str = "build/indexes"
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.language:
            raise ConfigError("language must be a non-empty string")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "language": "ja",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.language
            'ja'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_toml(cls, path: str | Path) -> RenderConfig:
        """Load configuration from a TOML file.

        Reads the ``[weft]`` table when the file has one, otherwise the top
        level.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        source = str(path)
        try:
            with Path(path).open("rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"unable to read config: {e}", source=source) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML: {e}", source=source) from e

        table = data.get("weft", data)
        if not isinstance(table, dict):
            raise ConfigError("[weft] must be a table", source=source)
        return cls.from_dict(table)


__all__ = ["RenderConfig"]
