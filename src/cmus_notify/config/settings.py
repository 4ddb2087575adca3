"""Settings management for cmus-notify."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from cmus_notify.config.file_ops import write_text_file
from cmus_notify.config.paths import default_config_path
from cmus_notify.platform.logging import logger

DEPTH_DEFAULT: Final[int] = 1
TIMEOUT_MS_DEFAULT: Final[int] = 5000
SUMMARY_TEMPLATE_DEFAULT: Final[str] = "{title}"
BODY_TEMPLATE_DEFAULT: Final[str] = "{artist} - {album}"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Settings:
    """Notification and cover lookup settings."""

    # Notification behaviour
    timeout_ms: int = TIMEOUT_MS_DEFAULT
    persistent: bool = False

    # Icon selection
    show_track_cover: bool = True
    static_icon: Path | None = _path_field()
    cover_path_template: str | None = None
    depth: int = DEPTH_DEFAULT
    force_use_external_cover: bool = False
    no_use_external_cover: bool = False

    # Text templates
    summary_template: str = SUMMARY_TEMPLATE_DEFAULT
    body_template: str = BODY_TEMPLATE_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Settings | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and sanitise bounds."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 0:
            logger.warning("Invalid depth %r; using %d", self.depth, DEPTH_DEFAULT)
            self.depth = DEPTH_DEFAULT

        if not self.cover_path_template:
            self.cover_path_template = None

    def save(self, path: Path | None = None) -> None:
        """Save settings to ``path`` (default: the configured settings file)."""
        settings_dict = asdict(self)
        for key, value in settings_dict.items():
            if isinstance(value, Path):
                settings_dict[key] = str(value)

        try:
            target = path or default_config_path()
            write_text_file(target, self._render_toml(settings_dict))
            logger.info("Settings saved to %s", target)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)
            raise

    def _render_toml(self, settings: dict[str, Any]) -> str:
        """Render settings as TOML with inline guidance."""

        lines: list[str] = ["# cmus-notify configuration file", ""]

        lines.append("# Notification timeout in milliseconds")
        lines.append(f"timeout_ms = {self._format_toml_value(settings['timeout_ms'])}")
        lines.append("# Keep the notification until it is dismissed")
        lines.append(f"persistent = {self._format_toml_value(settings['persistent'])}")
        lines.append("")

        lines.append("# Show the track cover as the notification icon")
        lines.append(
            f"show_track_cover = {self._format_toml_value(settings['show_track_cover'])}"
        )
        lines.append("# Icon used when show_track_cover is false (optional)")
        lines.append('# Example: static_icon = "/usr/share/icons/cmus.png"')
        if settings["static_icon"] is not None:
            lines.append(f"static_icon = {self._format_toml_value(settings['static_icon'])}")
        lines.append("# Cover path template, placeholders as in the summary (optional)")
        lines.append('# Example: cover_path_template = "/covers/{artist}/{album}.jpg"')
        if settings["cover_path_template"] is not None:
            lines.append(
                "cover_path_template = "
                f"{self._format_toml_value(settings['cover_path_template'])}"
            )
        lines.append("# Parent directories searched for an external cover")
        lines.append(f"depth = {self._format_toml_value(settings['depth'])}")
        lines.append("# Prefer an external cover over the embedded one")
        lines.append(
            "force_use_external_cover = "
            f"{self._format_toml_value(settings['force_use_external_cover'])}"
        )
        lines.append("# Never search the filesystem for a cover")
        lines.append(
            "no_use_external_cover = "
            f"{self._format_toml_value(settings['no_use_external_cover'])}"
        )
        lines.append("")

        lines.append("# Templates; {title} is the track name, {key} any tag")
        lines.append(
            f"summary_template = {self._format_toml_value(settings['summary_template'])}"
        )
        lines.append(f"body_template = {self._format_toml_value(settings['body_template'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if settings["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(settings['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings, creating the file with defaults when it is missing.

        Args:
            path: Explicit settings file. Defaults to :func:`default_config_path`.

        Returns:
            Settings: Loaded settings object, cached per file.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    settings_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(settings_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown settings in %s: %s", config_file, ", ".join(unknown)
                    )
                instance = cls(**{k: v for k, v in settings_dict.items() if k in known})
                logger.debug("Settings loaded from %s", config_file)
            else:
                instance = cls()
                instance.save(config_file)
                logger.info("Created default settings at %s", config_file)
        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            logger.error("Failed to load settings: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = [
    "BODY_TEMPLATE_DEFAULT",
    "DEPTH_DEFAULT",
    "SUMMARY_TEMPLATE_DEFAULT",
    "Settings",
    "TIMEOUT_MS_DEFAULT",
]
