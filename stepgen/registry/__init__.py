"""
stepgen/registry/__init__.py

Parameter type registry and the built-in parameter types.
"""

from stepgen.registry.builtin_parameter_types import build_default_registry
from stepgen.registry.parameter_type_registry import ParameterTypeRegistry

__all__ = [
    "ParameterTypeRegistry",
    "build_default_registry",
]
