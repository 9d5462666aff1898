from typing import TYPE_CHECKING, Any, Optional, cast

from plugin_check.domain.config import ConfigurationLoader
from plugin_check.infrastructure.config_file_loader import ConfigFileLoader
from plugin_check.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from plugin_check.infrastructure.gateways.json_wire_gateway import JsonWireCodec
from plugin_check.interface.reporters import TextAnnotationReporter
from plugin_check.interface.telemetry import ProjectTelemetry
from plugin_check.use_cases.merge_annotations import (
    EncodeResponseUseCase,
    MergeAnnotationsUseCase,
)

if TYPE_CHECKING:
    from plugin_check.domain.protocols import (
        AnnotationReporterProtocol,
        FileSystemProtocol,
        TelemetryPort,
        WireCodecProtocol,
    )


class PluginCheckContainer:
    """Dependency Injection Container for plugin-check."""

    def __init__(self, config_loader: Optional[ConfigurationLoader] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: Optional[ConfigurationLoader]) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
            config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("PLUGIN-CHECK")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("WireCodec", JsonWireCodec(indent=config_loader.json_indent))
        self.register_singleton("AnnotationReporter", TextAnnotationReporter())

        merge_use_case = MergeAnnotationsUseCase(telemetry=telemetry)
        self.register_singleton("MergeAnnotationsUseCase", merge_use_case)
        self.register_singleton("EncodeResponseUseCase", EncodeResponseUseCase(merge_use_case))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_wire_codec(self) -> "WireCodecProtocol":
        """Return the JSON wire codec."""
        return cast("WireCodecProtocol", self.get("WireCodec"))

    def get_reporter(self) -> "AnnotationReporterProtocol":
        """Return the text reporter."""
        return cast("AnnotationReporterProtocol", self.get("AnnotationReporter"))

    def get_merge_use_case(self) -> MergeAnnotationsUseCase:
        """Return the merge use case."""
        return cast(MergeAnnotationsUseCase, self.get("MergeAnnotationsUseCase"))

    def get_encode_use_case(self) -> EncodeResponseUseCase:
        """Return the encode use case."""
        return cast(EncodeResponseUseCase, self.get("EncodeResponseUseCase"))
