"""
Application Settings
===================

Executable lookup and environment configuration using Pydantic Settings.
Every field can be overridden with an ``API_PARSER_`` prefixed environment
variable or a ``.env`` file.
"""

from typing import Optional, List, Union
from typing_extensions import Annotated
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
import json
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="go-zero API Parser", description="Application name")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Optional[Path] = Field(
        default=None, description="Directory for rotating log files, console only when unset"
    )

    # Executable Configuration
    executable_path: Optional[Path] = Field(
        default=None, description="Explicit parser executable, auto-detected when unset"
    )
    package_root: Path = Field(
        default=PACKAGE_ROOT, description="Directory holding prebuilt and compiled executables"
    )
    platform_binary_name: str = Field(
        default="api-parser-macos-arm64", description="Prebuilt macOS ARM executable name"
    )
    compiled_binary_name: str = Field(
        default="api-parser-compiled", description="Executable name used for local builds"
    )

    # Toolchain Configuration
    toolchain_command: str = Field(default="go", description="Go toolchain command")
    source_entry: Path = Field(
        default=Path("go/main.go"), description="Parser entry point relative to the package root"
    )
    build_flags: Annotated[List[str], NoDecode] = Field(
        default=["-mod=readonly"], description="Extra flags passed to the build command"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("build_flags", mode="before")
    @classmethod
    def parse_build_flags(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse build flags from string or list."""
        if isinstance(v, str):
            # Handle JSON-like string: ["-mod=readonly", "-trimpath"]
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            # Handle comma-separated string: "-mod=readonly,-trimpath"
            return [flag.strip() for flag in v.split(",") if flag.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="API_PARSER_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
