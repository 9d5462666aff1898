"""Use Case: Merge Annotations - concatenate rule batches and sort them once."""

import logging
from typing import Iterable, Optional

from plugin_check.domain.entities import Annotation
from plugin_check.domain.messages import CheckResponseMessage
from plugin_check.domain.ordering import sort_annotations
from plugin_check.domain.protocols import TelemetryPort
from plugin_check.domain.wire import response_to_wire

logger = logging.getLogger(__name__)


class MergeAnnotationsUseCase:
    """Merge batches from independently executed rules into one ordered list."""

    def __init__(self, telemetry: Optional[TelemetryPort] = None) -> None:
        self.telemetry = telemetry

    def execute(self, batches: Iterable[Iterable[Annotation]]) -> list[Annotation]:
        """
        Concatenate every batch and sort the result.

        The output depends only on the combined contents, never on the order
        in which batches arrive.

        Args:
            batches: Annotation batches, one per rule run

        Returns:
            A new list ordered by file location, rule id, then message.
        """
        merged: list[Annotation] = []
        batch_count = 0
        for batch in batches:
            merged.extend(batch)
            batch_count += 1
        logger.debug("Merging %d annotation(s) from %d batch(es)", len(merged), batch_count)
        if self.telemetry is not None:
            self.telemetry.step(f"Merged {len(merged)} annotation(s) from {batch_count} batch(es)")
        return sort_annotations(merged)


class EncodeResponseUseCase:
    """Merge batches, then project them into a check response message."""

    def __init__(self, merge_use_case: MergeAnnotationsUseCase) -> None:
        self.merge_use_case = merge_use_case

    def execute(self, batches: Iterable[Iterable[Annotation]]) -> CheckResponseMessage:
        """Return the wire response for the merged, sorted batches."""
        return response_to_wire(self.merge_use_case.execute(batches))
