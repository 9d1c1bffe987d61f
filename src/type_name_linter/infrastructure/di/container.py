from typing import TYPE_CHECKING, Any, cast

from type_name_linter.domain.config import TypeNameConfiguration
from type_name_linter.domain.rules.type_name import TypeNameRule
from type_name_linter.infrastructure.config_file_loader import ConfigFileLoader
from type_name_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from type_name_linter.infrastructure.gateways.sourcekitten_gateway import SourceKittenGateway
from type_name_linter.infrastructure.reporters import TerminalAuditReporter
from type_name_linter.interface.telemetry import ProjectTelemetry
from type_name_linter.use_cases.check_type_names import CheckTypeNamesUseCase

if TYPE_CHECKING:
    from type_name_linter.domain.protocols import TelemetryPort


class TypeNameContainer:
    """Dependency Injection Container for the type name linter."""

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: dict[str, object] | None) -> None:
        """Register default implementations. Raises ConfigurationError for a bad [tool.type-name]."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        configuration = TypeNameConfiguration.from_dict(config_dict)
        self.register_singleton("TypeNameConfiguration", configuration)

        telemetry = ProjectTelemetry("TYPE-NAME", "cyan", "Swift type name audit online")
        self.register_singleton("TelemetryPort", telemetry)

        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        sourcekit = SourceKittenGateway(filesystem=filesystem)
        self.register_singleton("SourceKittenGateway", sourcekit)

        rule = TypeNameRule(configuration)
        self.register_singleton("TypeNameRule", rule)
        self.register_singleton(
            "CheckTypeNamesUseCase",
            CheckTypeNamesUseCase(
                rule=rule,
                filesystem=filesystem,
                sourcekit_gateway=sourcekit,
                telemetry=telemetry,
            ),
        )
        self.register_singleton("AuditReporter", TerminalAuditReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_configuration(self) -> TypeNameConfiguration:
        return cast(TypeNameConfiguration, self.get("TypeNameConfiguration"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_sourcekit_gateway(self) -> SourceKittenGateway:
        return cast(SourceKittenGateway, self.get("SourceKittenGateway"))

    def get_rule(self) -> TypeNameRule:
        return cast(TypeNameRule, self.get("TypeNameRule"))

    def get_check_use_case(self) -> CheckTypeNamesUseCase:
        return cast(CheckTypeNamesUseCase, self.get("CheckTypeNamesUseCase"))

    def get_reporter(self) -> TerminalAuditReporter:
        return cast(TerminalAuditReporter, self.get("AuditReporter"))
