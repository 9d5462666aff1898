"""Wire messages: the canonical cross-process form of annotations.

Messages are plain frozen dataclasses. ``to_dict`` follows proto3 JSON
conventions: absent sub-messages and empty strings are omitted, so an absent
location never turns into a zero-valued one on the wire.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from plugin_check.domain.constants import (
    WIRE_AGAINST_FILE_LOCATION,
    WIRE_ANNOTATIONS,
    WIRE_END_COLUMN,
    WIRE_END_LINE,
    WIRE_FILE_LOCATION,
    WIRE_FILE_PATH,
    WIRE_MESSAGE,
    WIRE_RULE_ID,
    WIRE_SOURCE_PATH,
    WIRE_START_COLUMN,
    WIRE_START_LINE,
)
from plugin_check.domain.errors import WireFormatError


def _expect_int(raw: dict[str, Any], key: str, where: str) -> int:
    value = raw.get(key, 0)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise WireFormatError(f"{where}.{key} must be an integer")
    return value


def _expect_str(raw: dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key, "")
    if not isinstance(value, str):
        raise WireFormatError(f"{where}.{key} must be a string")
    return value


@dataclass(frozen=True)
class FileLocationMessage:
    """Wire form of a location inside a described file."""

    file_path: str
    source_path: tuple[int, ...] = ()
    start_line: int = 0
    start_column: int = 0
    end_line: int = 0
    end_column: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict, omitting zero values."""
        out: dict[str, Any] = {WIRE_FILE_PATH: self.file_path}
        if self.source_path:
            out[WIRE_SOURCE_PATH] = list(self.source_path)
        for key, value in (
            (WIRE_START_LINE, self.start_line),
            (WIRE_START_COLUMN, self.start_column),
            (WIRE_END_LINE, self.end_line),
            (WIRE_END_COLUMN, self.end_column),
        ):
            if value:
                out[key] = value
        return out

    @classmethod
    def from_dict(cls, raw: object, where: str = WIRE_FILE_LOCATION) -> "FileLocationMessage":
        """Parse a dict produced by to_dict (or any proto3-JSON equivalent)."""
        if not isinstance(raw, dict):
            raise WireFormatError(f"{where} must be an object")
        raw_source_path = raw.get(WIRE_SOURCE_PATH, [])
        if not isinstance(raw_source_path, list) or not all(
            isinstance(x, int) and not isinstance(x, bool) for x in raw_source_path
        ):
            raise WireFormatError(f"{where}.{WIRE_SOURCE_PATH} must be a list of integers")
        return cls(
            file_path=_expect_str(raw, WIRE_FILE_PATH, where),
            source_path=tuple(raw_source_path),
            start_line=_expect_int(raw, WIRE_START_LINE, where),
            start_column=_expect_int(raw, WIRE_START_COLUMN, where),
            end_line=_expect_int(raw, WIRE_END_LINE, where),
            end_column=_expect_int(raw, WIRE_END_COLUMN, where),
        )


@dataclass(frozen=True)
class AnnotationMessage:
    """Wire form of a single rule failure."""

    rule_id: str
    message: str = ""
    file_location: Optional[FileLocationMessage] = None
    against_file_location: Optional[FileLocationMessage] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict."""
        out: dict[str, Any] = {WIRE_RULE_ID: self.rule_id}
        if self.message:
            out[WIRE_MESSAGE] = self.message
        if self.file_location is not None:
            out[WIRE_FILE_LOCATION] = self.file_location.to_dict()
        if self.against_file_location is not None:
            out[WIRE_AGAINST_FILE_LOCATION] = self.against_file_location.to_dict()
        return out

    @classmethod
    def from_dict(cls, raw: object, where: str = "annotation") -> "AnnotationMessage":
        """Parse a wire dict. rule_id must be present; emptiness is checked on construction."""
        if not isinstance(raw, dict):
            raise WireFormatError(f"{where} must be an object")
        if WIRE_RULE_ID not in raw:
            raise WireFormatError(f"Missing key '{WIRE_RULE_ID}' in {where}")
        file_location = None
        if raw.get(WIRE_FILE_LOCATION) is not None:
            file_location = FileLocationMessage.from_dict(
                raw[WIRE_FILE_LOCATION], f"{where}.{WIRE_FILE_LOCATION}"
            )
        against_file_location = None
        if raw.get(WIRE_AGAINST_FILE_LOCATION) is not None:
            against_file_location = FileLocationMessage.from_dict(
                raw[WIRE_AGAINST_FILE_LOCATION], f"{where}.{WIRE_AGAINST_FILE_LOCATION}"
            )
        return cls(
            rule_id=_expect_str(raw, WIRE_RULE_ID, where),
            message=_expect_str(raw, WIRE_MESSAGE, where),
            file_location=file_location,
            against_file_location=against_file_location,
        )


@dataclass(frozen=True)
class CheckResponseMessage:
    """Wire form of a complete check response: annotations in sorted order."""

    annotations: tuple[AnnotationMessage, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict. The annotation order is preserved."""
        return {WIRE_ANNOTATIONS: [a.to_dict() for a in self.annotations]}

    @classmethod
    def from_dict(cls, raw: object) -> "CheckResponseMessage":
        """Parse either {"annotations": [...]} or a bare list of annotations."""
        if isinstance(raw, dict):
            unknown = sorted(str(k) for k in raw if k != WIRE_ANNOTATIONS)
            if unknown:
                raise WireFormatError(
                    f"Unknown key(s) {', '.join(repr(k) for k in unknown)} in check response"
                )
            if WIRE_ANNOTATIONS not in raw:
                raise WireFormatError(f"Missing key '{WIRE_ANNOTATIONS}' in check response")
            raw_annotations = raw[WIRE_ANNOTATIONS]
        else:
            raw_annotations = raw
        if not isinstance(raw_annotations, list):
            raise WireFormatError(f"'{WIRE_ANNOTATIONS}' must be a list")
        return cls(
            annotations=tuple(
                AnnotationMessage.from_dict(item, f"{WIRE_ANNOTATIONS}[{i}]")
                for i, item in enumerate(raw_annotations)
            )
        )
