"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from plugin_check.infrastructure.di.container import PluginCheckContainer
from plugin_check.interface.cli import CLIAppFactory, CLIDependencies
from plugin_check.interface.telemetry import ProjectTelemetry


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = PluginCheckContainer()
    config_loader = container.get_config_loader()
    ProjectTelemetry.configure(config_loader.log_level)

    deps = CLIDependencies(
        config_loader=config_loader,
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        wire_codec=container.get_wire_codec(),
        reporter=container.get_reporter(),
        merge_use_case=container.get_merge_use_case(),
        encode_use_case=container.get_encode_use_case(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
