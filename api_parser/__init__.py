"""
go-zero API Parser Bridge
=========================

Python bridge to the go-zero ``.api`` parser. Parsing itself is done by an
external Go executable; this package finds or builds that executable, runs it
against API files and decodes the JSON it prints.

This package provides:
- Executable resolution with platform binaries and on-demand compilation
- Subprocess invocation with merged output capture
- Decoding of the parser output into queryable documents
"""

from api_parser.core.dsl.parser import ApiParser
from api_parser.core.errors import (
    ApiParserError,
    CompileFailedError,
    DecodeFailedError,
    ExecutionFailedError,
    InputNotFoundError,
    MissingExecutableError,
    NotExecutableError,
    ToolchainUnavailableError,
)
from api_parser.core.executor.invoker import ProcessInvoker
from api_parser.core.executor.resolver import ExecutableResolver
from api_parser.models.schemas import ApiDocument, InvocationOutcome, ParseResult

__version__ = "1.0.0"

__all__ = [
    "ApiDocument",
    "ApiParser",
    "ApiParserError",
    "CompileFailedError",
    "DecodeFailedError",
    "ExecutableResolver",
    "ExecutionFailedError",
    "InputNotFoundError",
    "InvocationOutcome",
    "MissingExecutableError",
    "NotExecutableError",
    "ParseResult",
    "ProcessInvoker",
    "ToolchainUnavailableError",
]
