"""
Test Configuration
==================

Pytest configuration with fixtures shared by all test types.
Provides testing settings, temporary package roots, fake executables and
sample API files.
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

# Settings are read on first import of the package
os.environ.setdefault("API_PARSER_ENVIRONMENT", "testing")
os.environ.setdefault("API_PARSER_LOG_LEVEL", "DEBUG")

from pydantic_settings import SettingsConfigDict

from api_parser.config.settings import Settings, reload_settings
from api_parser.core.executor.resolver import ExecutableResolver
from api_parser.core.executor.toolchain import GoToolchain
from api_parser.models.schemas import PlatformInfo

from tests.utils.data_generators import ApiOutputGenerator, write_api_file
from tests.utils.mocks import create_cat_executable, create_mock_executable


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    log_level: str = "DEBUG"
    toolchain_command: str = "api-parser-test-missing-go"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="API_PARSER_")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def reset_global_settings() -> Generator[None, None, None]:
    """Make sure the global settings reflect the testing environment."""
    reload_settings()
    yield
    reload_settings()


@pytest.fixture(scope="session")
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp(prefix="api_parser_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def package_root(tmp_path: Path) -> Path:
    """Empty directory standing in for the installed package."""
    root = tmp_path / "package"
    root.mkdir()
    return root


@pytest.fixture
def linux_host() -> PlatformInfo:
    return PlatformInfo(system="Linux", machine="x86_64")


@pytest.fixture
def macos_arm_host() -> PlatformInfo:
    return PlatformInfo(system="Darwin", machine="arm64")


@pytest.fixture
def missing_toolchain() -> GoToolchain:
    """Toolchain whose command does not exist."""
    return GoToolchain(command="api-parser-test-missing-go")


@pytest.fixture
def make_resolver(
    package_root: Path, linux_host: PlatformInfo, missing_toolchain: GoToolchain, test_settings: TestSettings
) -> Callable[..., ExecutableResolver]:
    """Factory for resolvers rooted in the temporary package directory."""

    def factory(**overrides) -> ExecutableResolver:
        options = {
            "package_root": package_root,
            "toolchain": missing_toolchain,
            "host": linux_host,
            "settings": test_settings,
        }
        options.update(overrides)
        return ExecutableResolver(**options)

    return factory


@pytest.fixture
def mock_executable(tmp_path: Path) -> Path:
    """Parser printing the default sample document."""
    return create_mock_executable(tmp_path / "bin" / "api-parser")


@pytest.fixture
def cat_executable(tmp_path: Path) -> Path:
    """Parser printing the content of the file it is given."""
    return create_cat_executable(tmp_path / "bin" / "api-parser-cat")


@pytest.fixture
def api_file(tmp_path: Path) -> Path:
    return write_api_file(tmp_path / "apis" / "user.api")


@pytest.fixture
def default_output() -> dict:
    return ApiOutputGenerator.default_output()
