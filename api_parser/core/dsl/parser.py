"""
API Parser
==========

High level entry point: runs the external parser through a ProcessInvoker
and decodes its output. Every ``get_*`` accessor parses the file again;
callers that need several sections should call ``parse_file`` once and use
the ApiDocument properties.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from api_parser.config.logging import get_logger
from api_parser.core.dsl.decoder import decode_batch, decode_output
from api_parser.core.executor.invoker import ProcessInvoker
from api_parser.models.schemas import ApiDocument, ParseResult

logger = get_logger(__name__)

PathLike = Union[str, Path]


class ApiParser:
    """Parses go-zero ``.api`` files into ApiDocument instances."""

    def __init__(self, invoker: Optional[ProcessInvoker] = None):
        self._invoker = invoker or ProcessInvoker()
        self.logger: Any = logger.bind(component="api_parser")

    @property
    def invoker(self) -> ProcessInvoker:
        return self._invoker

    @invoker.setter
    def invoker(self, invoker: ProcessInvoker) -> None:
        self._invoker = invoker

    def parse_file(self, api_file_path: PathLike) -> ApiDocument:
        """
        Parse one API file.

        Raises:
            InputNotFoundError: If the file does not exist
            ExecutionFailedError: If the parser fails
            DecodeFailedError: If the parser output is not a JSON object
        """
        self.logger.info("Parsing API file", file=str(api_file_path))
        return decode_output(self._invoker.execute(api_file_path))

    def parse_file_to_json(self, api_file_path: PathLike, pretty_print: bool = True) -> str:
        """Parse one API file and serialise the result back to JSON."""
        return self.parse_file(api_file_path).to_json(pretty=pretty_print)

    def parse_multiple_files(self, api_file_paths: Iterable[PathLike]) -> Dict[str, ParseResult]:
        """
        Parse several API files, one failure never affecting the others.

        Returns:
            Mapping of file path to ParseResult; repeated paths keep the last result
        """
        return decode_batch(self._invoker.execute_multiple(api_file_paths))

    def get_info(self, api_file_path: PathLike) -> Dict[str, Any]:
        return self.parse_file(api_file_path).info

    def get_syntax(self, api_file_path: PathLike) -> Union[Dict[str, Any], str]:
        return self.parse_file(api_file_path).syntax

    def get_imports(self, api_file_path: PathLike) -> List[Any]:
        return self.parse_file(api_file_path).imports

    def get_types(self, api_file_path: PathLike) -> List[Dict[str, Any]]:
        """Type definitions declared in the file itself; imported types are not included."""
        return self.parse_file(api_file_path).types

    def get_service(self, api_file_path: PathLike) -> Dict[str, Any]:
        return self.parse_file(api_file_path).service

    def get_groups(self, api_file_path: PathLike) -> List[Dict[str, Any]]:
        return self.parse_file(api_file_path).groups

    def get_routes(self, api_file_path: PathLike) -> List[Dict[str, Any]]:
        return self.parse_file(api_file_path).routes
