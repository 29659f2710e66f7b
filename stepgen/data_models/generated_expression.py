"""
stepgen/data_models/generated_expression.py

Data models produced by the expression generator.

Contains:
- ParameterTypeMatch: A located occurrence of a parameter type's regexp in the text
- GeneratedExpression: Source text plus the selected matches, renderable as a template
"""

from pydantic import BaseModel, ConfigDict, Field

from stepgen.data_models.parameter_type import ParameterType


class ParameterTypeMatch(BaseModel):
    """A candidate match: where a parameter type's regexp matched in the text."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(description="Zero-based offset of the match in the source text")
    length: int = Field(description="Number of characters consumed by the match")
    parameter_type: ParameterType = Field(description="The parameter type whose regexp matched")

    @property
    def end(self) -> int:
        return self.start + self.length

    def outranks(self, other: "ParameterTypeMatch") -> bool:
        """
        Whether this match beats another one starting at the same offset.

        Wider wins; on equal width the parameter type that sorts first wins.
        Full ties never outrank, so the first-seen candidate is kept.
        """
        if self.length != other.length:
            return self.length > other.length
        return self.parameter_type.sort_key() < other.parameter_type.sort_key()


class GeneratedExpression(BaseModel):
    """
    The result of generating an expression from a sentence.

    Holds the source text and the selected, non-overlapping matches in
    left-to-right order. Literal text between matches is copied unescaped,
    so '{' or '}' in the sentence pass straight into the template.
    """
    text: str = Field(description="The source sentence")
    matches: list[ParameterTypeMatch] = Field(
        default_factory=list,
        description="Selected matches, non-overlapping, ordered by start offset"
    )

    @property
    def parameter_types(self) -> list[ParameterType]:
        return [match.parameter_type for match in self.matches]

    @property
    def parameter_names(self) -> list[str]:
        """Positional argument names: arg1, arg2, ..."""
        return [f"arg{index}" for index in range(1, len(self.matches) + 1)]

    def render(self, use_parameter_type_names: bool) -> str:
        """
        Render the template string.

        Args:
            use_parameter_type_names: Render {argN:typeName} instead of {argN}.
                Unnamed parameter types always render as {argN}.

        Returns:
            The source text with every selected match replaced by its placeholder.
        """
        parts: list[str] = []
        position = 0
        for parameter_name, match in zip(self.parameter_names, self.matches):
            parts.append(self.text[position:match.start])
            type_name = match.parameter_type.name
            if use_parameter_type_names and type_name:
                parts.append(f"{{{parameter_name}:{type_name}}}")
            else:
                parts.append(f"{{{parameter_name}}}")
            position = match.end
        parts.append(self.text[position:])
        return "".join(parts)
