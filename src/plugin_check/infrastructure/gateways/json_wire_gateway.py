"""JSON wire codec - Infrastructure implementation of WireCodecProtocol."""

import json

from plugin_check.domain.entities import Annotation
from plugin_check.domain.errors import WireFormatError
from plugin_check.domain.messages import CheckResponseMessage
from plugin_check.domain.protocols import WireCodecProtocol
from plugin_check.domain.wire import annotation_from_wire


class JsonWireCodec(WireCodecProtocol):
    """Encode responses as proto3-style JSON and decode batches back into annotations."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def decode_batch(self, text: str, source: str = "<input>") -> list[Annotation]:
        """
        Parse one batch of annotations.

        Accepts {"annotations": [...]} or a bare list. Every failure (bad JSON,
        bad shape, empty rule id, bad location) is raised as WireFormatError
        naming the source.
        """
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise WireFormatError(f"{source}: invalid JSON: {e}") from e
        try:
            response = CheckResponseMessage.from_dict(raw)
            annotations = [annotation_from_wire(m) for m in response.annotations]
        except ValueError as e:
            raise WireFormatError(f"{source}: {e}") from e
        return [a for a in annotations if a is not None]

    def encode_response(self, response: CheckResponseMessage) -> str:
        """Serialize a response. Annotation order is kept as given."""
        if self.indent:
            return json.dumps(response.to_dict(), indent=self.indent)
        return json.dumps(response.to_dict(), separators=(",", ":"))
