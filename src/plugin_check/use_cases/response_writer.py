"""Response writer: collects the annotations of a single rule run."""

from typing import Optional

from plugin_check.domain.entities import Annotation
from plugin_check.domain.errors import InvalidAnnotationError
from plugin_check.domain.protocols import LocationProtocol


class ResponseWriter:
    """
    Builds annotations for one rule. Every annotation gets the writer's rule id.

    A writer belongs to one rule run; batches from many writers are combined
    with MergeAnnotationsUseCase.
    """

    def __init__(self, rule_id: str) -> None:
        if not rule_id:
            raise InvalidAnnotationError("ResponseWriter: rule_id is empty")
        self._rule_id = rule_id
        self._annotations: list[Annotation] = []

    @property
    def rule_id(self) -> str:
        """The rule this writer reports for."""
        return self._rule_id

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        """Snapshot of the annotations added so far, in insertion order."""
        return tuple(self._annotations)

    def add_annotation(
        self,
        message: str = "",
        file_location: Optional[LocationProtocol] = None,
        against_file_location: Optional[LocationProtocol] = None,
    ) -> Annotation:
        """Construct and record an annotation for this rule."""
        annotation = Annotation(
            rule_id=self._rule_id,
            message=message,
            file_location=file_location,
            against_file_location=against_file_location,
        )
        self._annotations.append(annotation)
        return annotation
