"""
stepgen/expression_generator.py

Generates step expression templates from example sentences.

Contains:
- ExpressionGenerator: generate() / generate_expression()

Selection is greedy and never backtracks:
1. Every regexp of every snippet-eligible parameter type is run over the whole text.
2. Per start offset the widest candidate wins; equal widths go to the parameter type
   that sorts first (preferential types, then by name), else the first registered.
3. The text is swept left to right; a winner starting at the scan position is taken
   and the scan jumps past it, so an earlier match always beats a later, wider one.
"""

from collections.abc import Iterator

from stepgen.data_models.generated_expression import GeneratedExpression, ParameterTypeMatch
from stepgen.registry.parameter_type_registry import ParameterTypeRegistry
from stepgen.utils.logger import get_logger

logger = get_logger(name=__name__)


class ExpressionGenerator:
    """
    Builds templates like "I have {arg1:int} cukes" over a parameter type registry.
    """

    def __init__(self, parameter_type_registry: ParameterTypeRegistry | None) -> None:
        self._parameter_type_registry = parameter_type_registry

    def _find_candidates(self, text: str) -> Iterator[ParameterTypeMatch]:
        """Yield every match reported by every eligible regexp, in registration order."""
        if self._parameter_type_registry is None:
            return
        for parameter_type in self._parameter_type_registry.parameter_types_eligible_for_snippets():
            for regexp in parameter_type.compiled_regexps:
                for match in regexp.finditer(text):
                    # empty matches would never advance the sweep
                    if match.end() == match.start():
                        continue
                    yield ParameterTypeMatch(
                        start=match.start(),
                        length=match.end() - match.start(),
                        parameter_type=parameter_type,
                    )

    def _best_candidates_by_start(self, text: str) -> dict[int, ParameterTypeMatch]:
        best: dict[int, ParameterTypeMatch] = {}
        for candidate in self._find_candidates(text):
            current = best.get(candidate.start)
            if current is None or candidate.outranks(current):
                best[candidate.start] = candidate
        return best

    def generate(self, text: str) -> GeneratedExpression:
        """
        Select the non-overlapping, leftmost-then-widest matches in a sentence.

        Args:
            text: The example sentence.

        Returns:
            GeneratedExpression with the selected matches in left-to-right order.
        """
        best = self._best_candidates_by_start(text)

        matches: list[ParameterTypeMatch] = []
        position = 0
        while position < len(text):
            match = best.get(position)
            if match is None:
                position += 1
                continue
            matches.append(match)
            position = match.end

        logger.debug(
            "Selected %d of %d candidate start offsets in %r",
            len(matches), len(best), text,
        )
        return GeneratedExpression(text=text, matches=matches)

    def generate_expression(self, text: str, use_parameter_type_names: bool) -> str:
        """
        Generate the template string for a sentence.

        Args:
            text: The example sentence.
            use_parameter_type_names: Render {argN:typeName} instead of {argN}.

        Returns:
            The template. Text without any match is returned unchanged.
        """
        expression = self.generate(text).render(use_parameter_type_names)
        logger.debug("Generated expression %r from %r", expression, text)
        return expression
