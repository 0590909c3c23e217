"""
Pydantic Models and Schemas
===========================

Core data models for executable resolution, process invocation and decoded
parser output. Descriptors and outcomes are immutable once created.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Platform Models
class PlatformInfo(BaseModel):
    """Host operating system and CPU architecture."""

    model_config = ConfigDict(frozen=True)

    system: str = Field(..., description="OS name as reported by platform.system()")
    machine: str = Field(..., description="CPU architecture as reported by platform.machine()")

    @property
    def is_macos_arm(self) -> bool:
        return self.system == "Darwin" and self.machine in ("arm64", "aarch64")


class SystemInfo(BaseModel):
    """Diagnostic snapshot of the host environment."""

    os: str
    arch: str
    python_version: str
    toolchain_version: Optional[str] = None
    toolchain_available: bool = False


# Executor Models
class ExecutableDescriptor(BaseModel):
    """The parser executable currently in use."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Executable location")
    auto_detected: bool = Field(False, description="Whether the path came from auto-detection")


class CompileAttempt(BaseModel):
    """Result of one build of the parser executable."""

    model_config = ConfigDict(frozen=True)

    source_path: Path
    output_path: Path
    success: bool
    output: Optional[str] = Field(None, description="Build output, kept only on failure")


class InvocationOutcome(BaseModel):
    """Outcome of running the parser against one file."""

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="Whether the parser exited cleanly")
    output: Optional[str] = Field(None, description="Raw parser output on success")
    error: Optional[str] = Field(None, description="Error message on failure")

    @model_validator(mode="after")
    def check_exclusive(self) -> "InvocationOutcome":
        if self.success and (self.output is None or self.error is not None):
            raise ValueError("successful outcome requires output and no error")
        if not self.success and (self.error is None or self.output is not None):
            raise ValueError("failed outcome requires error and no output")
        return self

    @classmethod
    def succeeded(cls, output: str) -> "InvocationOutcome":
        return cls(success=True, output=output)

    @classmethod
    def failed(cls, error: str) -> "InvocationOutcome":
        return cls(success=False, error=error)


# Document Models
def lookup_section(
    tree: Any,
    key: str,
    default: Callable[[], Any],
    kinds: Optional[Tuple[type, ...]] = None,
) -> Any:
    """
    Return tree[key] or tree[Key], or default() when neither is set.

    When ``kinds`` is given, values of any other type count as unset.
    """
    if not isinstance(tree, dict):
        return default()
    for candidate in (key, key[:1].upper() + key[1:]):
        value = tree.get(candidate)
        if value is None:
            continue
        if kinds is None or isinstance(value, kinds):
            return value
    return default()


class ApiDocument(BaseModel):
    """Decoded parser output.

    The payload is kept as a generic tree so new sections emitted by the
    parser need no model changes. Accessors look a section up by its
    lower-case key first and then by the exported Go field name
    (``info`` then ``Info``), returning an empty container when absent or
    of an unexpected type.
    """

    model_config = ConfigDict(frozen=True)

    data: Dict[str, Any] = Field(default_factory=dict, description="Whole decoded document")
    warnings: List[str] = Field(default_factory=list, description="Shape validation warnings")

    @property
    def info(self) -> Dict[str, Any]:
        return lookup_section(self.data, "info", dict, (dict,))

    @property
    def syntax(self) -> Union[Dict[str, Any], str]:
        return lookup_section(self.data, "syntax", dict, (dict, str))

    @property
    def imports(self) -> List[Any]:
        return lookup_section(self.data, "imports", list, (list,))

    @property
    def types(self) -> List[Dict[str, Any]]:
        return lookup_section(self.data, "types", list, (list,))

    @property
    def service(self) -> Dict[str, Any]:
        return lookup_section(self.data, "service", dict, (dict,))

    @property
    def groups(self) -> List[Dict[str, Any]]:
        return lookup_section(self.service, "groups", list, (list,))

    @property
    def routes(self) -> List[Dict[str, Any]]:
        """All routes of the service, group order preserved."""
        routes = list(lookup_section(self.service, "routes", list, (list,)))
        for group in self.groups:
            routes.extend(lookup_section(group, "routes", list, (list,)))
        return routes

    def to_json(self, pretty: bool = True) -> str:
        return json.dumps(self.data, ensure_ascii=False, indent=4 if pretty else None)


class ParseResult(BaseModel):
    """Result of decoding one file's parser output."""

    success: bool = Field(..., description="Whether parsing succeeded")
    document: Optional[ApiDocument] = Field(None, description="Parsed document")
    errors: List[str] = Field(default_factory=list, description="Parsing errors")
    warnings: List[str] = Field(default_factory=list, description="Parsing warnings")
    processing_time: Optional[float] = Field(None, description="Decoding time in seconds")

    @property
    def error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None
