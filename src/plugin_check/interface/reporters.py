"""Text rendering of annotation batches."""

from typing import Iterable

from plugin_check.domain.entities import Annotation
from plugin_check.domain.protocols import AnnotationReporterProtocol


class TextAnnotationReporter(AnnotationReporterProtocol):
    """
    One line per annotation, in the order given:

        path:line:column:rule_id message

    Lines and columns are shown one-based. Annotations without a location are
    printed with a "<input>" path.
    """

    def render(self, annotations: Iterable[Annotation]) -> str:
        lines = [self._render_one(a) for a in annotations]
        return "\n".join(lines)

    def _render_one(self, annotation: Annotation) -> str:
        prefix = "<input>"
        location = annotation.file_location
        file_path = getattr(location, "file_path", None)
        if file_path:
            prefix = (
                f"{file_path}:{getattr(location, 'start_line', 0) + 1}"
                f":{getattr(location, 'start_column', 0) + 1}"
            )
        line = f"{prefix}:{annotation.rule_id}"
        if annotation.message:
            line += f" {annotation.message}"
        against = annotation.against_file_location
        against_path = getattr(against, "file_path", None)
        if against_path:
            line += f" (against {against_path}:{getattr(against, 'start_line', 0) + 1})"
        return line
