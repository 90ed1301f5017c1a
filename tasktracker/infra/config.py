"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations
"""

import os
from pathlib import Path
from typing import Optional
import yaml

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file (only for fields not set explicitly)
    3. Environment variables (highest priority)
    """
    model_config = SettingsConfigDict(
        env_prefix='TASKTRACKER_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        validate_assignment=True
    )

    # Application paths
    app_name: str = "TaskTracker"
    config_dir: Optional[Path] = None
    data_dir: Optional[Path] = None

    # Database
    database_url: Optional[str] = None
    echo_sql: bool = False

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # API behaviour
    default_page_size: int = Field(default=10, ge=1)
    strict_task_owner: bool = Field(
        default=False,
        description="Refuse to start tasks for users that do not exist"
    )
    allow_restop: bool = Field(
        default=True,
        description="Stopping a stopped task overwrites its end time instead of failing"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self._load_yaml_config()

    def _init_paths(self):
        """Initialize default paths based on OS"""
        if self.config_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA'))
            else:  # Linux/Mac
                base = Path.home() / '.config'
            self.config_dir = base / self.app_name.lower()

        if self.data_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA'))
            else:  # Linux/Mac
                base = Path.home() / '.local' / 'share'
            self.data_dir = base / self.app_name.lower()

    def _load_yaml_config(self):
        """Load configuration from YAML file"""
        # First check in workspace config folder
        config_file = Path("config/settings.yaml")
        if not config_file.exists():
            # Then check in user's config directory
            config_file = self.config_dir / "settings.yaml"

        if not config_file.exists():
            return

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        # Explicit kwargs and environment variables win over the file
        for key, value in config_data.items():
            if key in type(self).model_fields and key not in self.model_fields_set:
                setattr(self, key, value)

    def get_db_url(self) -> str:
        """Get database URL, creating default if not set"""
        if self.database_url:
            return self.database_url

        self.data_dir.mkdir(parents=True, exist_ok=True)
        db_path = self.data_dir / 'tasktracker.db'
        return f"sqlite+aiosqlite:///{db_path}"


# Settings for the process entry point only; the app factory takes an instance.
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
