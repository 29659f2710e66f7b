"""
tests/conftest.py

Configuration for pytest.
"""

from collections.abc import Callable
from typing import Any

import pytest

from stepgen.data_models.parameter_type import ParameterType
from stepgen.expression_generator import ExpressionGenerator
from stepgen.registry.builtin_parameter_types import build_default_registry
from stepgen.registry.parameter_type_registry import ParameterTypeRegistry


@pytest.fixture
def registry() -> ParameterTypeRegistry:
    """
    Fresh registry pre-populated with the built-in parameter types.
    Returns:
        ParameterTypeRegistry with int, double, string, etc.
    """
    return build_default_registry()


@pytest.fixture
def generator(registry: ParameterTypeRegistry) -> ExpressionGenerator:
    """
    Expression generator over the default registry fixture.
    Returns:
        ExpressionGenerator sharing the `registry` fixture, so types registered
        in a test are visible to it.
    """
    return ExpressionGenerator(registry)


@pytest.fixture
def make_parameter_type() -> Callable[..., ParameterType]:
    """
    Factory fixture to create custom (non-builtin) ParameterType instances.

    Usage:
        currency = make_parameter_type("currency", "[A-Z]{3}")
        date = make_parameter_type("date", ["bc", "cb"], prefer_for_regexp_match=True)
    """
    def factory(name: str | None, regexps: Any, **kwargs: Any) -> ParameterType:
        return ParameterType(name=name, regexps=regexps, **kwargs)
    return factory
