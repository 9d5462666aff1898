"""Domain model for rule failures."""

from dataclasses import dataclass
from typing import Optional, final

from plugin_check.domain.errors import InvalidAnnotationError
from plugin_check.domain.messages import AnnotationMessage
from plugin_check.domain.protocols import LocationProtocol


@final
@dataclass(frozen=True)
class Annotation:
    """
    A rule failure.

    An annotation always carries the id of the rule that failed. It optionally
    carries a user-readable message, the location of the failure, and the
    location of the failure in the against input. The against location is only
    produced by breaking change rules.

    Locations are held by reference and never copied or normalized.
    """

    rule_id: str
    message: str = ""
    file_location: Optional[LocationProtocol] = None
    against_file_location: Optional[LocationProtocol] = None

    def __post_init__(self) -> None:
        if not self.rule_id:
            raise InvalidAnnotationError("Annotation: rule_id is empty")

    def to_wire(self) -> AnnotationMessage:
        """Project into the wire message. Absent locations stay absent."""
        return AnnotationMessage(
            rule_id=self.rule_id,
            message=self.message,
            file_location=self.file_location.to_wire() if self.file_location is not None else None,
            against_file_location=(
                self.against_file_location.to_wire()
                if self.against_file_location is not None
                else None
            ),
        )
