"""
Executable Resolver
===================

Decides which API parser executable to run. An explicit path is only
validated; otherwise an ordered list of probes is tried and the first one
that yields a usable executable wins:

1. the prebuilt macOS ARM binary (only on macOS ARM hosts)
2. a previously compiled binary
3. a fresh build with the local Go toolchain

When all probes fail the error explains how to install Go, or carries the
build output when Go is present but the build failed.
"""

import os
import platform
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from api_parser.config.logging import get_logger
from api_parser.config.settings import Settings, get_settings
from api_parser.core.errors import (
    CompileFailedError,
    MissingExecutableError,
    NotExecutableError,
    ToolchainUnavailableError,
)
from api_parser.core.executor.platform import (
    detect_platform,
    go_installation_message,
    is_executable_file,
)
from api_parser.core.executor.toolchain import GoToolchain
from api_parser.models.schemas import (
    CompileAttempt,
    ExecutableDescriptor,
    PlatformInfo,
    SystemInfo,
)

logger = get_logger(__name__)

Probe = Callable[[], Optional[Path]]


def validate_executable(path: Union[str, Path]) -> Path:
    """
    Check that an explicitly given executable can be run.

    Raises:
        MissingExecutableError: If the path does not exist
        NotExecutableError: If the path is not an executable file
    """
    path = Path(path)
    if not path.exists():
        raise MissingExecutableError(path)
    if not is_executable_file(path):
        raise NotExecutableError(path)
    return path


class ExecutableResolver:
    """Locates or builds the API parser executable for the current host."""

    def __init__(
        self,
        *,
        package_root: Optional[Path] = None,
        compile_target: Optional[Path] = None,
        source_entry: Optional[Path] = None,
        toolchain: Optional[GoToolchain] = None,
        host: Optional[PlatformInfo] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.settings = settings
        self.package_root = Path(package_root) if package_root else settings.package_root
        self.platform_binary = self.package_root / settings.platform_binary_name
        self.compile_target = (
            Path(compile_target) if compile_target else self.package_root / settings.compiled_binary_name
        )
        if source_entry is not None:
            self.source_entry = Path(source_entry)
        elif settings.source_entry.is_absolute():
            self.source_entry = settings.source_entry
        else:
            self.source_entry = self.package_root / settings.source_entry
        self.toolchain = toolchain or GoToolchain(settings.toolchain_command, settings.build_flags)
        self.host = host or detect_platform()
        self.last_compile_attempt: Optional[CompileAttempt] = None
        self.logger: Any = logger.bind(component="resolver")

    def resolve(self, executable_path: Optional[Union[str, Path]] = None) -> ExecutableDescriptor:
        """
        Produce the executable descriptor to use.

        Args:
            executable_path: Explicit executable, auto-detected when None

        Returns:
            Validated ExecutableDescriptor

        Raises:
            MissingExecutableError: Explicit path does not exist
            NotExecutableError: Explicit path is not executable
            ToolchainUnavailableError: Nothing found and Go is not installed
            CompileFailedError: Nothing found and building failed
        """
        if executable_path is not None:
            path = validate_executable(executable_path)
            self.logger.debug("Using explicit executable", path=str(path))
            return ExecutableDescriptor(path=path, auto_detected=False)
        return self.auto_detect()

    def probes(self) -> List[Tuple[str, Probe]]:
        """Auto-detection steps in priority order."""
        return [
            ("platform_binary", self._probe_platform_binary),
            ("compiled_binary", self._probe_compiled_binary),
            ("compile_on_demand", self._probe_compile),
        ]

    def auto_detect(self) -> ExecutableDescriptor:
        self.last_compile_attempt = None

        for name, probe in self.probes():
            path = probe()
            if path is not None:
                self.logger.info("Resolved API parser executable", probe=name, path=str(path))
                return ExecutableDescriptor(path=path, auto_detected=True)
            self.logger.debug("Probe found nothing", probe=name)

        attempt = self.last_compile_attempt
        if attempt is not None:
            self.logger.error("API parser build failed", source=str(attempt.source_path))
            raise CompileFailedError(
                f"Unable to build the API parser from {attempt.source_path}. "
                f"Make sure the Go entry point exists and compiles.",
                output=attempt.output,
            )

        self.logger.error("No API parser executable and no Go toolchain", os=self.host.system)
        raise ToolchainUnavailableError(go_installation_message(self.host))

    def _probe_platform_binary(self) -> Optional[Path]:
        if not self.host.is_macos_arm:
            return None
        return self._usable(self.platform_binary)

    def _probe_compiled_binary(self) -> Optional[Path]:
        return self._usable(self.compile_target)

    def _probe_compile(self) -> Optional[Path]:
        if not self.toolchain.is_available():
            return None
        self.last_compile_attempt = self.toolchain.compile(self.source_entry, self.compile_target)
        if self.last_compile_attempt.success:
            return self.last_compile_attempt.output_path
        return None

    def _usable(self, path: Path) -> Optional[Path]:
        return path if is_executable_file(path) else None

    def system_info(self) -> SystemInfo:
        """Snapshot of the host and toolchain for diagnostics."""
        version = self.toolchain.version()
        return SystemInfo(
            os=self.host.system,
            arch=self.host.machine,
            python_version=platform.python_version(),
            toolchain_version=version,
            toolchain_available=version is not None,
        )

    def path_info(self) -> Dict[str, Any]:
        """Candidate locations and whether each exists, for debugging lookups."""
        candidates = {
            "platform_binary": self.platform_binary,
            "compiled_binary": self.compile_target,
            "source_entry": self.source_entry,
        }
        return {
            "package_root": str(self.package_root),
            "working_directory": os.getcwd(),
            "candidates": {name: str(path) for name, path in candidates.items()},
            "exists": {name: path.exists() for name, path in candidates.items()},
        }
