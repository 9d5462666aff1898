"""CLI entry points for plugin-check - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from plugin_check.domain.config import ConfigurationLoader
from plugin_check.domain.constants import OUTPUT_FORMATS
from plugin_check.domain.entities import Annotation
from plugin_check.domain.errors import WireFormatError
from plugin_check.domain.protocols import (
    AnnotationReporterProtocol,
    FileSystemProtocol,
    TelemetryPort,
    WireCodecProtocol,
)
from plugin_check.use_cases.merge_annotations import (
    EncodeResponseUseCase,
    MergeAnnotationsUseCase,
)

EXIT_ANNOTATIONS = 1
EXIT_INVALID_INPUT = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    wire_codec: WireCodecProtocol
    reporter: AnnotationReporterProtocol
    merge_use_case: MergeAnnotationsUseCase
    encode_use_case: EncodeResponseUseCase


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def load_batches(deps: CLIDependencies, paths: list[Path]) -> list[tuple[str, list[Annotation]]]:
        """
        Read every batch file under paths, in path order.

        Directories are scanned for *.json files. Raises WireFormatError or
        OSError on the first file that cannot be loaded.
        """
        batches: list[tuple[str, list[Annotation]]] = []
        for path in paths:
            for file_path in deps.filesystem.glob_batch_files(str(path)):
                text = deps.filesystem.read_text(file_path)
                batches.append((file_path, deps.wire_codec.decode_batch(text, source=file_path)))
        return batches

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="plugin-check",
            help="Merge, sort and encode rule-failure annotations.",
            add_completion=False,
        )

        def _load_or_exit(paths: list[Path]) -> list[tuple[str, list[Annotation]]]:
            try:
                return CLIAppFactory.load_batches(deps, paths)
            except (WireFormatError, OSError) as e:
                deps.telemetry.error(str(e))
                typer.echo(f"error: {e}", err=True)
                raise typer.Exit(code=EXIT_INVALID_INPUT) from e

        @app.command()
        def merge(
            paths: list[Path] = typer.Argument(..., help="Batch files or directories of *.json batches"),  # noqa: B008
            output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),  # noqa: B008
            output_format: Optional[str] = typer.Option(
                None, "--format", "-f", help="json or text (default: from [tool.plugin-check], else json)"
            ),
        ) -> None:
            """Merge annotation batches into one deterministically ordered response."""
            deps.telemetry.handshake()
            fmt = output_format or deps.config_loader.output_format
            if fmt not in OUTPUT_FORMATS:
                typer.echo(f"error: --format must be one of {', '.join(sorted(OUTPUT_FORMATS))}", err=True)
                raise typer.Exit(code=EXIT_INVALID_INPUT)

            batches = [batch for _, batch in _load_or_exit(paths)]
            if fmt == "text":
                annotations = deps.merge_use_case.execute(batches)
                content = deps.reporter.render(annotations)
                count = len(annotations)
            else:
                response = deps.encode_use_case.execute(batches)
                content = deps.wire_codec.encode_response(response)
                count = len(response.annotations)

            if output is not None:
                deps.filesystem.write_text(str(output), content + "\n")
                deps.telemetry.step(f"Wrote {count} annotation(s) to {output}")
            elif content:
                typer.echo(content)

            if count and deps.config_loader.fail_on_annotations:
                raise typer.Exit(code=EXIT_ANNOTATIONS)

        @app.command()
        def validate(
            paths: list[Path] = typer.Argument(..., help="Batch files or directories of *.json batches"),  # noqa: B008
        ) -> None:
            """Check that every batch file decodes into valid annotations."""
            deps.telemetry.handshake()
            loaded = _load_or_exit(paths)
            for file_path, batch in loaded:
                typer.echo(f"{file_path}: {len(batch)} annotation(s)")
            typer.echo(f"{len(loaded)} batch file(s) OK")

        return app
