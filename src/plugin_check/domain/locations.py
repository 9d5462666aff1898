"""FileLocation: the Location value referenced by annotations."""

from dataclasses import dataclass
from typing import Optional

from plugin_check.domain.errors import InvalidLocationError
from plugin_check.domain.messages import FileLocationMessage
from plugin_check.domain.protocols import LocationProtocol


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _wire_sort_key(message: FileLocationMessage) -> tuple[str, int, int, int, int, tuple[int, ...]]:
    return (
        message.file_path,
        message.start_line,
        message.start_column,
        message.end_line,
        message.end_column,
        tuple(message.source_path),
    )


@dataclass(frozen=True)
class FileLocation:
    """
    A position inside a described file.

    ``source_path`` is the descriptor source path (field numbers and indices
    leading to the element). Lines and columns are zero-based, as in
    descriptor source spans.
    """

    file_path: str
    source_path: tuple[int, ...] = ()
    start_line: int = 0
    start_column: int = 0
    end_line: int = 0
    end_column: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.file_path, str) or not self.file_path:
            raise InvalidLocationError("FileLocation: file_path is empty")
        if not isinstance(self.source_path, tuple):
            # Accept any sequence but store an immutable tuple
            try:
                source_path = tuple(self.source_path)
            except TypeError as e:
                raise InvalidLocationError(
                    f"FileLocation: source_path must be a sequence of integers, got {self.source_path!r}"
                ) from e
            object.__setattr__(self, "source_path", source_path)
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in self.source_path):
            raise InvalidLocationError(
                f"FileLocation: source_path must contain integers, got {self.source_path!r}"
            )
        for name in ("start_line", "start_column", "end_line", "end_column"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidLocationError(
                    f"FileLocation: {name} must be a non-negative integer, got {value!r}"
                )

    def sort_key(self) -> tuple[str, int, int, int, int, tuple[int, ...]]:
        """Canonical ordering key: path, span, then source path."""
        return _wire_sort_key(self.to_wire())

    def compare(self, other: LocationProtocol) -> int:
        """Three-way comparison on sort_key. Other locations are keyed by their wire form."""
        mine, theirs = self.sort_key(), _wire_sort_key(other.to_wire())
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def to_wire(self) -> FileLocationMessage:
        """Project into the wire sub-message."""
        return FileLocationMessage(
            file_path=self.file_path,
            source_path=self.source_path,
            start_line=self.start_line,
            start_column=self.start_column,
            end_line=self.end_line,
            end_column=self.end_column,
        )

    @classmethod
    def from_wire(cls, message: FileLocationMessage) -> "FileLocation":
        """Rebuild from a wire sub-message, validating on the way in."""
        return cls(
            file_path=message.file_path,
            source_path=message.source_path,
            start_line=message.start_line,
            start_column=message.start_column,
            end_line=message.end_line,
            end_column=message.end_column,
        )


def compare_file_locations(
    one: Optional[LocationProtocol], two: Optional[LocationProtocol]
) -> int:
    """Compare two optional locations. An absent location sorts first."""
    if one is None and two is None:
        return 0
    if one is None:
        return -1
    if two is None:
        return 1
    return _sign(one.compare(two))
