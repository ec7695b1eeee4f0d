"""Configuration management for cddbtool."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from cddbtool.config.file_ops import write_text_file
from cddbtool.config.paths import default_config_path
from cddbtool.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration.

    Every value is optional; unset values fall back to
    ``cddbtool.config.settings`` and may be overridden by CLI flags.
    """

    # CDDB server
    cgi_url: str | None = None
    proto_level: int | None = None
    encoding: str | None = None
    output_encoding: str | None = None

    # Hello identity sent with every command
    hello_user: str | None = None
    hello_host: str | None = None
    app_name: str | None = None
    app_version: str | None = None

    # Output locations
    log_file: Path | None = _path_field()
    xmcd_out_dir: Path | None = _path_field()
    cdplayer_ini_path: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to ``path`` (default config location)."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# cddbtool Configuration File")
        lines.append("")

        lines.append("# FreeDB-compatible CGI endpoint")
        lines.append('# Example: cgi_url = "http://gnudb.gnudb.org/~cddb/cddb.cgi"')
        self._append_value(lines, config, "cgi_url")
        lines.append("# CDDB protocol level (default 6)")
        self._append_value(lines, config, "proto_level")
        lines.append("")

        lines.append("# Response encoding: euc-jp (default), shift_jis, utf-8, ...")
        self._append_value(lines, config, "encoding")
        lines.append("# Encoding for saved XMCD files (defaults to the response encoding)")
        self._append_value(lines, config, "output_encoding")
        lines.append("")

        lines.append("# Hello identity (user and host are required by CDDB servers)")
        for key in ("hello_user", "hello_host", "app_name", "app_version"):
            self._append_value(lines, config, key)
        lines.append("")

        lines.append("# Output locations (optional)")
        for key in ("log_file", "xmcd_out_dir", "cdplayer_ini_path"):
            self._append_value(lines, config, key)
        lines.append("")

        return "\n".join(lines)

    def _append_value(self, lines: list[str], config: dict[str, Any], key: str) -> None:
        value = config.get(key)
        if value is None or value == "":
            lines.append(f"# {key} =")
            return
        lines.append(f"{key} = {self._format_toml_value(value)}")

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a config from parsed TOML, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values = {key: value for key, value in data.items() if key in known}
        proto_level = values.get("proto_level")
        if proto_level is not None and (not isinstance(proto_level, int) or proto_level <= 0):
            logger.warning("Ignoring invalid proto_level: %r", proto_level)
            values["proto_level"] = None
        return cls(**values)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file is created with defaults. Results are cached per
        process until ``reset`` is called.

        Args:
            path: Optional explicit config file path.

        Returns:
            Config: Loaded configuration object.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                instance = cls.from_mapping(config_dict)
                logger.info("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                _ = instance.save(config_file)
                logger.info("Created default configuration at %s", config_file)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
