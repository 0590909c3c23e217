"""
Process Invoker
===============

Runs the resolved API parser executable against API files. Arguments are
passed as a plain argv list, never through a shell, and stderr is merged
into stdout so parser diagnostics travel with the output.

Calls block until the child exits; there is no timeout. Batches run one
file at a time in the order given.
"""

import subprocess
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from api_parser.config.logging import get_logger
from api_parser.core.errors import (
    ApiParserError,
    ExecutionFailedError,
    InputNotFoundError,
)
from api_parser.core.executor.resolver import ExecutableResolver, validate_executable
from api_parser.models.schemas import ExecutableDescriptor, InvocationOutcome, SystemInfo

logger = get_logger(__name__)

PathLike = Union[str, Path]


class ProcessInvoker:
    """Executes the API parser and collects its output."""

    def __init__(
        self,
        executable_path: Optional[PathLike] = None,
        resolver: Optional[ExecutableResolver] = None,
    ):
        """
        Args:
            executable_path: Explicit parser executable. When None the
                resolver's ``executable_path`` setting is used, and when that
                is unset too the executable is auto-detected.
            resolver: Resolver to use, a default one is created when None
        """
        self.resolver = resolver or ExecutableResolver()
        if executable_path is None:
            executable_path = self.resolver.settings.executable_path
        self._descriptor = self.resolver.resolve(executable_path)
        self.logger: Any = logger.bind(component="invoker")

    @property
    def descriptor(self) -> ExecutableDescriptor:
        return self._descriptor

    @property
    def executable_path(self) -> Path:
        return self._descriptor.path

    @property
    def is_auto_detected(self) -> bool:
        return self._descriptor.auto_detected

    def set_executable_path(self, executable_path: PathLike) -> None:
        """Switch to another executable. The new path is validated first."""
        path = validate_executable(executable_path)
        self._descriptor = ExecutableDescriptor(path=path, auto_detected=False)
        self.logger.info("Executable path changed", path=str(path))

    def execute(self, api_file_path: PathLike) -> str:
        """
        Run the parser against one API file.

        Args:
            api_file_path: API file to parse

        Returns:
            Raw parser output (stdout and stderr combined)

        Raises:
            InputNotFoundError: If the API file does not exist
            ExecutionFailedError: If the parser cannot be started or exits non-zero
        """
        api_file = Path(api_file_path)
        if not api_file.exists():
            raise InputNotFoundError(api_file_path)

        executable = self._descriptor.path
        self.logger.debug("Running API parser", executable=str(executable), file=str(api_file))
        try:
            result = subprocess.run(
                [str(executable), str(api_file)],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            self.logger.error("API parser could not be started", executable=str(executable), error=str(e))
            raise ExecutionFailedError(f"cannot start {executable}: {e}") from e

        if result.returncode != 0:
            self.logger.warning(
                "API parser exited with an error", file=str(api_file), returncode=result.returncode
            )
            raise ExecutionFailedError(result.stdout, returncode=result.returncode)

        return result.stdout

    def invoke(self, api_file_path: PathLike) -> InvocationOutcome:
        """Run the parser against one file, returning failures as data."""
        try:
            return InvocationOutcome.succeeded(self.execute(api_file_path))
        except ApiParserError as e:
            return InvocationOutcome.failed(str(e))

    def execute_each(self, api_file_paths: Iterable[PathLike]) -> List[Tuple[str, InvocationOutcome]]:
        """
        Run the parser against every file, one outcome per occurrence.

        Returns:
            (path, outcome) pairs in input order, duplicates included
        """
        return [(str(path), self.invoke(path)) for path in api_file_paths]

    def execute_multiple(self, api_file_paths: Iterable[PathLike]) -> Dict[str, InvocationOutcome]:
        """
        Run the parser against several API files.

        A failing file never stops the batch. Results are keyed by path, so
        when a path is given more than once only its last outcome is kept;
        use ``execute_each`` to get one outcome per occurrence.

        Returns:
            Mapping of file path to its outcome
        """
        results: Dict[str, InvocationOutcome] = {}
        for path, outcome in self.execute_each(api_file_paths):
            results[path] = outcome

        failed = sum(1 for outcome in results.values() if not outcome.success)
        self.logger.info("Batch execution finished", files=len(results), failed=failed)
        return results

    def system_info(self) -> SystemInfo:
        return self.resolver.system_info()

    def path_info(self) -> Dict[str, Any]:
        info = self.resolver.path_info()
        info["active_executable"] = str(self._descriptor.path)
        info["auto_detected"] = self._descriptor.auto_detected
        return info
