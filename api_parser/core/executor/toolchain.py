"""
Go Toolchain
============

Probing for a Go installation and building the parser executable from source.
Nothing is cached: every call runs the toolchain again.
"""

import os
import subprocess
import uuid
from pathlib import Path
from typing import Any, List, Optional, Sequence

from api_parser.config.logging import get_logger
from api_parser.core.executor.platform import is_executable_file
from api_parser.models.schemas import CompileAttempt

logger = get_logger(__name__)


class GoToolchain:
    """Thin wrapper around the ``go`` command."""

    def __init__(self, command: str = "go", build_flags: Optional[Sequence[str]] = None):
        self.command = command
        self.build_flags: List[str] = list(build_flags) if build_flags is not None else ["-mod=readonly"]
        self.logger: Any = logger.bind(component="toolchain", command=command)

    def version(self) -> Optional[str]:
        """
        Query the toolchain version.

        Returns:
            First line of ``go version`` output, or None when the command is
            missing, exits non-zero or prints nothing
        """
        try:
            result = subprocess.run(
                [self.command, "version"],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as e:
            self.logger.debug("Toolchain probe failed to start", error=str(e))
            return None

        output = result.stdout.strip()
        if result.returncode != 0 or not output:
            self.logger.debug("Toolchain probe unsuccessful", returncode=result.returncode)
            return None
        return output.splitlines()[0].strip()

    def is_available(self) -> bool:
        return self.version() is not None

    def compile(self, source_path: Path, output_path: Path) -> CompileAttempt:
        """
        Build the parser from a Go entry point.

        The build runs in the entry point's directory and writes to a
        temporary sibling of ``output_path`` which is moved into place only
        when the build succeeded, so a failed build never leaves a file at
        ``output_path``. Build failures are reported, never raised.

        Args:
            source_path: Path of the ``main.go`` entry point
            output_path: Where the executable should end up

        Returns:
            CompileAttempt describing the outcome
        """
        source_path = Path(source_path).resolve()
        output_path = Path(output_path).resolve()

        if not source_path.is_file():
            self.logger.warning("Go entry point not found", source=str(source_path))
            return CompileAttempt(
                source_path=source_path,
                output_path=output_path,
                success=False,
                output=f"Go entry point not found: {source_path}",
            )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        staging_path = output_path.with_name(f".{output_path.name}.{uuid.uuid4().hex}.tmp")
        cmd = [self.command, "build", *self.build_flags, "-o", str(staging_path), source_path.name]

        self.logger.info("Compiling API parser", source=str(source_path), output=str(output_path))
        try:
            try:
                result = subprocess.run(
                    cmd,
                    cwd=str(source_path.parent),
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    errors="replace",
                    check=False,
                )
            except OSError as e:
                return self._failed(source_path, output_path, f"Failed to start {self.command}: {e}")

            if result.returncode != 0:
                return self._failed(source_path, output_path, result.stdout)

            if not is_executable_file(staging_path):
                return self._failed(
                    source_path, output_path, result.stdout or "Build produced no executable"
                )

            os.replace(staging_path, output_path)
        finally:
            if staging_path.exists():
                staging_path.unlink()

        if not is_executable_file(output_path):
            return self._failed(source_path, output_path, "Compiled executable is not executable")

        self.logger.info("API parser compiled", output=str(output_path))
        return CompileAttempt(source_path=source_path, output_path=output_path, success=True)

    def _failed(self, source_path: Path, output_path: Path, output: str) -> CompileAttempt:
        self.logger.warning("API parser compilation failed", source=str(source_path), output=output)
        return CompileAttempt(
            source_path=source_path, output_path=output_path, success=False, output=output
        )
