from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from plugin_check.domain.entities import Annotation
    from plugin_check.domain.messages import CheckResponseMessage, FileLocationMessage


class LocationProtocol(Protocol):
    """Capability an annotation needs from a location: ordering and wire projection."""

    def compare(self, other: "LocationProtocol") -> int:
        """Three-way comparison: negative, zero or positive."""
        ...

    def to_wire(self) -> "FileLocationMessage":
        """Project into the wire sub-message."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def glob_batch_files(self, path: str) -> list[str]:
        """Get all batch files in path (recursive if directory)."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...


class WireCodecProtocol(Protocol):
    """Protocol for turning batches into text and back."""

    def decode_batch(self, text: str, source: str = "<input>") -> list["Annotation"]:
        """Parse wire text into validated annotations."""
        ...

    def encode_response(self, response: "CheckResponseMessage") -> str:
        """Serialize a response message."""
        ...


class AnnotationReporterProtocol(Protocol):
    """Protocol for rendering a sorted batch for humans."""

    def render(self, annotations: Iterable["Annotation"]) -> str:
        """Return the text rendering of the annotations."""
        ...
