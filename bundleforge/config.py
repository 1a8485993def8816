"""Bundler configuration: env-driven.

Centralized config using pydantic-settings for environment variable
support. Reads from .env file and BUNDLEFORGE_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from bundleforge.models.assets import BundleType


class BundlerSettings(BaseSettings):
    """Bundler configuration with environment variable overrides.

    All settings can be overridden via BUNDLEFORGE_* environment variables
    or a .env file in the project root.

    Examples
    --------
    Override via environment::

        export BUNDLEFORGE_BASE_PATH=/srv/www/public
        export BUNDLEFORGE_WEB_ROOT=https://static.example.com
        export BUNDLEFORGE_LOG_LEVEL=DEBUG

    Or via .env file::

        BUNDLEFORGE_CACHE_PATH=/var/cache/bundleforge
        BUNDLEFORGE_USE_MINIFIED=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BUNDLEFORGE_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # Filesystem layout
    base_path: Path = Path(".")
    cache_path: Path = Path(".bundleforge/cache")

    # Public URLs
    web_root: str = ""
    web_path_css: str = "/css/combined/"
    web_path_js: str = "/js/combined/"

    # Behaviour
    use_minified: bool = True
    optimize_assets: bool = True

    def web_path(self, bundle_type: BundleType) -> str:
        """Return the web directory bundles of this type are served from."""
        if bundle_type is BundleType.CSS:
            return self.web_path_css
        return self.web_path_js

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton, import as `from bundleforge.config import config`
config = BundlerSettings()
