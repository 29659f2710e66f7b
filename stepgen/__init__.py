"""
stepgen

Infers reusable step expression templates from example sentences, e.g.
"I have 2 cukes and 1.5 euro" -> "I have {arg1:int} cukes and {arg2:double} euro".
"""

from stepgen.data_models.generated_expression import GeneratedExpression, ParameterTypeMatch
from stepgen.data_models.parameter_type import ParameterType
from stepgen.expression_generator import ExpressionGenerator
from stepgen.registry.builtin_parameter_types import build_default_registry
from stepgen.registry.parameter_type_registry import ParameterTypeRegistry

__all__ = [
    "ExpressionGenerator",
    "GeneratedExpression",
    "ParameterType",
    "ParameterTypeMatch",
    "ParameterTypeRegistry",
    "build_default_registry",
]
