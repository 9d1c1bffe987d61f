"""Unit tests for TypeNameContainer wiring."""

from unittest.mock import patch

import pytest

from type_name_linter.domain.errors import ConfigurationError
from type_name_linter.infrastructure.di.container import TypeNameContainer


def test_wires_configuration_into_rule_and_use_case() -> None:
    container = TypeNameContainer({"excluded": ["id"], "min_length": 4})
    configuration = container.get_configuration()
    assert configuration.excluded == frozenset({"id"})
    assert container.get_rule().configuration is configuration
    assert container.get_check_use_case().rule is container.get_rule()
    assert container.get_reporter() is container.get("AuditReporter")


def test_loads_pyproject_when_no_dict_given() -> None:
    with patch(
        "type_name_linter.infrastructure.di.container.ConfigFileLoader.load_config_from_fs",
        return_value={"validates_start_with_lowercase": False},
    ):
        container = TypeNameContainer()
    assert container.get_configuration().validates_start_with_lowercase is False


def test_bad_configuration_raises() -> None:
    with pytest.raises(ConfigurationError):
        TypeNameContainer({"min_length": "short"})


def test_unknown_key_raises_value_error() -> None:
    with pytest.raises(ValueError, match="not registered"):
        TypeNameContainer({}).get("Nope")
