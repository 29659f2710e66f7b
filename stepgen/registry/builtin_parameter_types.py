"""
stepgen/registry/builtin_parameter_types.py

Built-in parameter types and the default registry builder.

Contains:
- BUILTIN_PARAMETER_TYPES: int, double, float, biginteger, bigdecimal, byte, short, long,
  word, string and the anonymous type
- build_default_registry(): Fresh registry pre-populated with the built-ins
"""

from decimal import Decimal

from stepgen.data_models.parameter_type import ParameterType
from stepgen.registry.parameter_type_registry import ParameterTypeRegistry


INTEGER_REGEXP = r"-?\d+"
DECIMAL_REGEXP = r"-?\d*\.\d+"
WORD_REGEXP = r"[^\s]+"
STRING_REGEXP = r'"([^"\\]*(?:\\.[^"\\]*)*)"' + "|" + r"'([^'\\]*(?:\\.[^'\\]*)*)'"
ANONYMOUS_REGEXP = r".*"


def _unquote(double_quoted: str | None, single_quoted: str | None) -> str:
    """Return the contents of a quoted string with escaped quotes unescaped."""
    if double_quoted is not None:
        return double_quoted.replace('\\"', '"')
    return (single_quoted or "").replace("\\'", "'")


BUILTIN_PARAMETER_TYPES: tuple[ParameterType, ...] = (
    ParameterType(
        name="int",
        regexps=INTEGER_REGEXP,
        value_type=int,
        transformer=int,
        prefer_for_regexp_match=True,
        builtin=True,
    ),
    ParameterType(
        name="double",
        regexps=DECIMAL_REGEXP,
        value_type=float,
        transformer=float,
        prefer_for_regexp_match=True,
        builtin=True,
    ),
    ParameterType(
        name="float",
        regexps=DECIMAL_REGEXP,
        value_type=float,
        transformer=float,
        use_for_snippets=False,
        builtin=True,
    ),
    ParameterType(
        name="bigdecimal",
        regexps=DECIMAL_REGEXP,
        value_type=Decimal,
        transformer=Decimal,
        use_for_snippets=False,
        builtin=True,
    ),
    *(
        ParameterType(
            name=name,
            regexps=INTEGER_REGEXP,
            value_type=int,
            transformer=int,
            use_for_snippets=False,
            builtin=True,
        )
        for name in ("biginteger", "byte", "short", "long")
    ),
    ParameterType(
        name="word",
        regexps=WORD_REGEXP,
        value_type=str,
        use_for_snippets=False,
        builtin=True,
    ),
    ParameterType(
        name="string",
        regexps=STRING_REGEXP,
        value_type=str,
        transformer=_unquote,
        builtin=True,
    ),
    ParameterType(
        name="",
        regexps=ANONYMOUS_REGEXP,
        value_type=str,
        use_for_snippets=False,
        prefer_for_regexp_match=True,
        builtin=True,
    ),
)


def build_default_registry() -> ParameterTypeRegistry:
    """
    Build a registry holding the built-in parameter types.

    Returns:
        A new ParameterTypeRegistry; callers register their own types on top.
    """
    return ParameterTypeRegistry(BUILTIN_PARAMETER_TYPES)
