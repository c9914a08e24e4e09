"""Configuration settings for the Go interview site tooling.

Settings can be overridden via environment variables with prefix GO_INTERVIEW_
"""

import os
from pathlib import Path
from typing import Literal

from go_interview_site.utils.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "GO_INTERVIEW_"


class Settings:
    """Configuration settings for the site tooling.

    Environment variables take precedence over defaults but are overridden
    by keyword arguments passed to __init__.

    Example:
        >>> settings = Settings()
        >>> settings.hugo_bin
        'hugo'

        With environment variable:
        >>> os.environ["GO_INTERVIEW_HUGO_BIN"] = "/opt/hugo/bin/hugo"
        >>> settings = Settings()
        >>> settings.hugo_bin
        '/opt/hugo/bin/hugo'
    """

    def __init__(
        self,
        log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None,
        json_logs: bool | None = None,
        include_timestamp: bool | None = None,
        hugo_bin: str | None = None,
        site_root: str | Path | None = None,
        content_dir: str | None = None,
        publish_dir: str | None = None,
        generated_dir: str | None = None,
    ) -> None:
        """Initialize settings from environment variables or keyword arguments.

        Args:
            log_level: Logging level. Defaults to WARNING
                (GO_INTERVIEW_LOG_LEVEL).
            json_logs: Emit JSON log lines instead of rich console output.
                Defaults to False (GO_INTERVIEW_JSON_LOGS).
            include_timestamp: Whether to include timestamps in logs.
                Defaults to True (GO_INTERVIEW_INCLUDE_TIMESTAMP).
            hugo_bin: Name or path of the generator binary. Defaults to
                "hugo" (GO_INTERVIEW_HUGO_BIN).
            site_root: Directory holding hugo.toml and content/. Defaults
                to the current directory (GO_INTERVIEW_SITE_ROOT).
            content_dir: Content directory relative to the site root.
                Defaults to "content" (GO_INTERVIEW_CONTENT_DIR).
            publish_dir: Build output directory relative to the site root.
                Defaults to "public" (GO_INTERVIEW_PUBLISH_DIR).
            generated_dir: Generated resources cache relative to the site
                root. Defaults to "resources/_gen" (GO_INTERVIEW_GENERATED_DIR).
        """
        # Logging configuration
        self.log_level: str = (
            log_level if log_level is not None else self._get_str_env("LOG_LEVEL", "WARNING")
        )

        self.json_logs: bool = (
            json_logs if json_logs is not None else self._get_bool_env("JSON_LOGS", default=False)
        )

        self.include_timestamp: bool = (
            include_timestamp
            if include_timestamp is not None
            else self._get_bool_env("INCLUDE_TIMESTAMP", default=True)
        )

        # Generator and site layout
        self.hugo_bin: str = hugo_bin if hugo_bin is not None else self._get_str_env("HUGO_BIN", "hugo")

        self.site_root: Path = Path(
            site_root if site_root is not None else self._get_str_env("SITE_ROOT", ".")
        )

        self.content_dir: str = (
            content_dir if content_dir is not None else self._get_str_env("CONTENT_DIR", "content")
        )

        self.publish_dir: str = (
            publish_dir if publish_dir is not None else self._get_str_env("PUBLISH_DIR", "public")
        )

        self.generated_dir: str = (
            generated_dir
            if generated_dir is not None
            else self._get_str_env("GENERATED_DIR", "resources/_gen")
        )

    @property
    def content_path(self) -> Path:
        """Absolute path of the content directory."""
        return (self.site_root / self.content_dir).resolve()

    @property
    def publish_path(self) -> Path:
        """Absolute path of the build output directory."""
        return (self.site_root / self.publish_dir).resolve()

    @property
    def generated_path(self) -> Path:
        """Absolute path of the generated resources cache."""
        return (self.site_root / self.generated_dir).resolve()

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get boolean value from a prefixed environment variable.

        Interprets "true", "1", "yes", and "on" (case-insensitive) as True.
        """
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    def _get_str_env(self, key: str, default: str) -> str:
        """Get string value from a prefixed environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None or not value.strip():
            if value is not None:
                logger.warning("Ignoring empty environment variable", key=ENV_PREFIX + key)
            return default
        return value


settings = Settings()
