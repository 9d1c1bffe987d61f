"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import os
import sys

from type_name_linter.domain.errors import ConfigurationError
from type_name_linter.infrastructure.di.container import TypeNameContainer
from type_name_linter.interface.cli import EXIT_USAGE, CLIAppFactory, CLIDependencies
from type_name_linter.interface.telemetry import ProjectTelemetry


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(
        level=os.environ.get("TYPE_NAME_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        container = TypeNameContainer()
    except ConfigurationError as e:
        ProjectTelemetry("TYPE-NAME", "cyan", "Swift type name audit online").error(f"Configuration error: {e}")
        sys.exit(EXIT_USAGE)

    deps = CLIDependencies(
        configuration=container.get_configuration(),
        telemetry=container.get_telemetry_port(),
        check_use_case=container.get_check_use_case(),
        sourcekit_gateway=container.get_sourcekit_gateway(),
        reporter=container.get_reporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
