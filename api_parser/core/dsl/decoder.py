"""
Output Decoder
==============

Decodes the JSON printed by the API parser into ApiDocument instances.
The payload schema belongs to the parser, so shape checks here only produce
warnings and never reject a document.
"""

from typing import Any, Dict, List, Mapping, Optional
import json
import time
from cerberus import Validator  # type: ignore[import-untyped]

from api_parser.config.logging import get_logger
from api_parser.core.errors import DecodeFailedError
from api_parser.models.schemas import ApiDocument, InvocationOutcome, ParseResult, lookup_section

logger = get_logger(__name__)

SECTIONS = ("info", "syntax", "imports", "types", "service")


class DocumentValidator:
    """Best-effort shape validation of decoded parser output using Cerberus."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(component="validator")
        self._setup_schemas()

    def _setup_schemas(self) -> None:
        """Setup validation schemas."""
        route_list = {
            "type": "list",
            "nullable": True,
            "schema": {"type": "dict", "allow_unknown": True},
        }

        # Field names differ between parser versions, only containers are checked
        self.type_schema = {"type": "dict", "allow_unknown": True}

        self.service_schema = {
            "groups": route_list,
            "Groups": route_list,
            "routes": route_list,
            "Routes": route_list,
        }

        self.document_schema: Dict[str, Any] = {
            "info": {"type": "dict", "nullable": True},
            "syntax": {"type": ["dict", "string"], "nullable": True},
            "imports": {"type": "list", "nullable": True},
            "types": {"type": "list", "nullable": True, "schema": self.type_schema},
            "service": {
                "type": "dict",
                "nullable": True,
                "allow_unknown": True,
                "schema": self.service_schema,
            },
        }

    def validate_document(self, data: Dict[str, Any]) -> List[str]:
        """
        Check the recognized sections of a decoded document.

        Sections are looked up with the same key rules as the ApiDocument
        accessors, so ``Info`` and ``info`` are treated alike.

        Args:
            data: Decoded parser output

        Returns:
            List of warnings, empty when the shape looks as expected
        """
        sections = {
            key: lookup_section(data, key, lambda: None)
            for key in SECTIONS
        }
        sections = {key: value for key, value in sections.items() if value is not None}

        validator = Validator(self.document_schema)  # type: ignore[misc]
        validator.allow_unknown = True  # type: ignore[attr-defined]

        if validator.validate(sections):  # type: ignore[misc]
            return []
        return self._format_validation_errors(validator.errors)  # type: ignore[attr-defined]

    def _format_validation_errors(self, errors: Any, path: str = "") -> List[str]:
        """Format Cerberus validation errors into readable messages."""
        formatted_errors: List[str] = []

        for field, error_info in errors.items():
            current_path = f"{path}.{field}" if path else str(field)
            entries = error_info if isinstance(error_info, list) else [error_info]
            for entry in entries:
                if isinstance(entry, dict):
                    formatted_errors.extend(self._format_validation_errors(entry, current_path))
                else:
                    formatted_errors.append(f"{current_path}: {entry}")

        return formatted_errors


_default_validator: Optional[DocumentValidator] = None


def get_document_validator() -> DocumentValidator:
    """Get the shared validator instance."""
    global _default_validator
    if _default_validator is None:
        _default_validator = DocumentValidator()
    return _default_validator


def decode_output(raw_output: str, validator: Optional[DocumentValidator] = None) -> ApiDocument:
    """
    Decode raw parser output.

    Args:
        raw_output: Text printed by a successful parser run
        validator: Shape validator, the shared one when None

    Returns:
        ApiDocument wrapping the decoded mapping

    Raises:
        DecodeFailedError: If the output is not valid JSON or not a JSON object
    """
    try:
        data = json.loads(raw_output)
    except json.JSONDecodeError as e:
        logger.error("Parser output is not valid JSON", error=e.msg, line=e.lineno, column=e.colno)
        raise DecodeFailedError(
            f"{e.msg} at line {e.lineno}, column {e.colno}", raw_output
        ) from e
    except RecursionError as e:
        logger.error("Parser output is nested too deeply", length=len(raw_output))
        raise DecodeFailedError("document is nested too deeply to decode", raw_output) from e

    if not isinstance(data, dict):
        logger.error("Parser output is not a JSON object", type=type(data).__name__)
        raise DecodeFailedError(f"expected a JSON object, got {type(data).__name__}", raw_output)

    warnings = (validator or get_document_validator()).validate_document(data)
    if warnings:
        logger.warning("Parser output has an unexpected shape", warnings=warnings)

    return ApiDocument(data=data, warnings=warnings)


def decode_result(outcome: InvocationOutcome) -> ParseResult:
    """Decode one invocation outcome, capturing failures in the result."""
    start_time = time.time()

    if not outcome.success:
        return ParseResult(success=False, errors=[outcome.error or "unknown error"], processing_time=0.0)

    try:
        document = decode_output(outcome.output or "")
    except DecodeFailedError as e:
        return ParseResult(
            success=False,
            errors=[str(e)],
            processing_time=time.time() - start_time,
        )

    return ParseResult(
        success=True,
        document=document,
        warnings=document.warnings,
        processing_time=time.time() - start_time,
    )


def decode_batch(outcomes: Mapping[str, InvocationOutcome]) -> Dict[str, ParseResult]:
    """
    Decode every entry of a batch invocation independently.

    Args:
        outcomes: Mapping of file path to invocation outcome

    Returns:
        Mapping of file path to parse result
    """
    return {path: decode_result(outcome) for path, outcome in outcomes.items()}
