"""Projection between annotations and wire messages."""

from typing import Iterable, Optional

from plugin_check.domain.entities import Annotation
from plugin_check.domain.locations import FileLocation
from plugin_check.domain.messages import AnnotationMessage, CheckResponseMessage


def annotation_to_wire(annotation: Optional[Annotation]) -> Optional[AnnotationMessage]:
    """Project one annotation. None projects to None."""
    if annotation is None:
        return None
    return annotation.to_wire()


def annotations_to_wire(annotations: Iterable[Annotation]) -> tuple[AnnotationMessage, ...]:
    """Project an already sorted batch, keeping its order."""
    return tuple(annotation.to_wire() for annotation in annotations)


def response_to_wire(annotations: Iterable[Annotation]) -> CheckResponseMessage:
    """Wrap an already sorted batch in a check response."""
    return CheckResponseMessage(annotations=annotations_to_wire(annotations))


def annotation_from_wire(message: Optional[AnnotationMessage]) -> Optional[Annotation]:
    """
    Rebuild an annotation from its wire message.

    Construction validation runs again, so an empty rule id raises
    InvalidAnnotationError and a bad location raises InvalidLocationError.
    """
    if message is None:
        return None
    return Annotation(
        rule_id=message.rule_id,
        message=message.message,
        file_location=(
            FileLocation.from_wire(message.file_location)
            if message.file_location is not None
            else None
        ),
        against_file_location=(
            FileLocation.from_wire(message.against_file_location)
            if message.against_file_location is not None
            else None
        ),
    )
