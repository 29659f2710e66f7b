"""
stepgen/data_models/parameter_type.py

Parameter type model: a named value class recognised in step text by one or more regexps.

Contains:
- ParameterType: Immutable (frozen) model with name, regexps, transformer and snippet flags
- ParameterType.compare() / sort_key(): preferential types first, then by name
- is_valid_parameter_type_name() / check_parameter_type_name(): name legality rules
"""

import re
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from stepgen.utils.exceptions import FlagError, InvalidPatternError, NameLegalityError


# An escaped metacharacter is a literal and never makes a name illegal.
_ESCAPED_METACHARACTER_PATTERN = re.compile(r"\\[\[\]$.|?*+]")
_ILLEGAL_PARAMETER_NAME_PATTERN = re.compile(r"[{}()\\/\[\]$.|?*+]")

# re.UNICODE is implied for every str pattern; anything else changes matching semantics.
_FORBIDDEN_FLAGS: tuple[re.RegexFlag, ...] = (
    re.IGNORECASE,
    re.MULTILINE,
    re.DOTALL,
    re.VERBOSE,
    re.ASCII,
    re.LOCALE,
)


def _check_flags(pattern: re.Pattern[str]) -> None:
    """Raise FlagError if a compiled pattern carries any flag besides the implied re.UNICODE."""
    for flag in _FORBIDDEN_FLAGS:
        if pattern.flags & flag:
            raise FlagError(f"ParameterType regexps can't use flag '{flag.name}'")


def _regexp_source(regexp: Any) -> str:
    """
    Turn a single regexp input into its source string.

    Args:
        regexp: A pattern string or a compiled, flag-free str pattern.

    Returns:
        The regexp source string.

    Raises:
        FlagError: If the pattern carries a forbidden flag, including inline ones like "(?i)".
        InvalidPatternError: If the input is not a str pattern or does not compile.
    """
    if isinstance(regexp, re.Pattern):
        if not isinstance(regexp.pattern, str):
            raise InvalidPatternError(f"ParameterType regexps must be str patterns, got {regexp.pattern!r}")
        _check_flags(regexp)
        return regexp.pattern

    if not isinstance(regexp, str):
        raise InvalidPatternError(
            f"ParameterType regexps must be strings or compiled patterns, got {type(regexp).__name__}"
        )
    try:
        compiled = re.compile(regexp)
    except re.error as e:
        raise InvalidPatternError(f"Invalid ParameterType regexp {regexp!r}: {e}") from e
    _check_flags(compiled)
    return regexp


def is_valid_parameter_type_name(type_name: str) -> bool:
    """
    Check a parameter type name against the legality rules.

    Backslash-escaped regexp metacharacters (e.g. "a\\.b") count as literals.
    After removing them, the name must not contain '{', '}', '(', ')', '\\', '/'
    or any of the metacharacters '[', ']', '$', '.', '|', '?', '*', '+'.
    """
    unescaped = _ESCAPED_METACHARACTER_PATTERN.sub("", type_name)
    return _ILLEGAL_PARAMETER_NAME_PATTERN.search(unescaped) is None


def check_parameter_type_name(type_name: str) -> None:
    """
    Raise NameLegalityError if the name is not a legal parameter type name.
    """
    if not is_valid_parameter_type_name(type_name):
        raise NameLegalityError(
            f"Illegal character in parameter name {{{type_name}}}. "
            "Parameter names may not contain '{', '}', '(', ')', '\\' or '/', "
            "nor unescaped '[', ']', '$', '.', '|', '?', '*' or '+'"
        )


class ParameterType(BaseModel):
    """
    A named kind of value and the regexps that recognise its textual form.

    Instances are frozen: name, regexps and flags never change after construction.
    The transformer converts captured group values into the value; the expression
    generator never calls it.
    """
    model_config = ConfigDict(frozen=True)

    name: str | None = Field(
        default=None,
        description="Type name used in {argN:name} placeholders; None for unnamed types"
    )
    regexps: tuple[str, ...] = Field(
        description="Ordered regexp sources recognising this type"
    )
    value_type: Any = Field(
        default=None,
        description="Informational constructor/factory of the converted value"
    )
    transformer: Callable[..., Any] | None = Field(
        default=None,
        description="Called with the captured group values; None returns the raw matched string"
    )
    use_for_snippets: bool = Field(
        default=True,
        description="Whether the type takes part in expression generation"
    )
    prefer_for_regexp_match: bool = Field(
        default=False,
        description="Preferred when several types share a regexp or tie on a match"
    )
    builtin: bool = Field(default=False, description="Whether the type is framework-provided")

    _compiled_regexps: tuple[re.Pattern[str], ...] = PrivateAttr(default=())

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str | None) -> str | None:
        if name:
            check_parameter_type_name(name)
        return name

    @field_validator("regexps", mode="before")
    @classmethod
    def normalize_regexps(cls, regexps: Any) -> tuple[str, ...]:
        """
        Accept a single pattern or a sequence of patterns, as strings or compiled patterns.
        """
        if isinstance(regexps, (str, re.Pattern)):
            regexps = [regexps]
        if not isinstance(regexps, (list, tuple)):
            raise InvalidPatternError(
                f"ParameterType regexps must be a pattern or a list of patterns, got {type(regexps).__name__}"
            )
        if not regexps:
            raise InvalidPatternError("ParameterType needs at least one regexp")
        return tuple(_regexp_source(regexp) for regexp in regexps)

    def model_post_init(self, __context: Any) -> None:
        self._compiled_regexps = tuple(re.compile(source) for source in self.regexps)

    @property
    def compiled_regexps(self) -> tuple[re.Pattern[str], ...]:
        """Compiled, flag-free patterns in declaration order."""
        return self._compiled_regexps

    def transform(self, group_values: list[str | None] | None) -> Any:
        """
        Convert captured group values into this type's value.

        Args:
            group_values: Captured group values in order.

        Returns:
            The transformer's result, or the first group value when no transformer is set.
            Anything the transformer raises propagates unchanged.
        """
        group_values = group_values or []
        if self.transformer is None:
            return group_values[0] if group_values else None
        return self.transformer(*group_values)

    def sort_key(self) -> tuple[bool, str]:
        """Key equivalent to compare(): preferential types first, then by name."""
        return (not self.prefer_for_regexp_match, self.name or "")

    @staticmethod
    def compare(pt1: "ParameterType", pt2: "ParameterType") -> int:
        """
        Three-way comparison used when ordering candidate parameter types.

        Returns:
            Negative if pt1 sorts first, positive if pt2 sorts first, 0 if equal.
        """
        if pt1.prefer_for_regexp_match and not pt2.prefer_for_regexp_match:
            return -1
        if pt2.prefer_for_regexp_match and not pt1.prefer_for_regexp_match:
            return 1
        name1 = pt1.name or ""
        name2 = pt2.name or ""
        return (name1 > name2) - (name1 < name2)
