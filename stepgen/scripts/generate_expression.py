"""
stepgen/scripts/generate_expression.py

Generate a step expression template from an example sentence.

Usage:
    stepgen-generate "I have 2 cukes and 1.5 euro"
    stepgen-generate "I have 2 cukes and 1.5 euro" --untyped
    stepgen-generate "I have a EUR account" --parameter-type "currency=[A-Z]{3}"
    stepgen-generate "I have a EUR account" --parameter-type "currency=[A-Z]{3}" --json
"""

import argparse
import json
import sys

from rich.console import Console
from rich.markup import escape

from stepgen.config import Config
from stepgen.data_models.generated_expression import GeneratedExpression
from stepgen.data_models.parameter_type import ParameterType
from stepgen.expression_generator import ExpressionGenerator
from stepgen.registry.builtin_parameter_types import build_default_registry
from stepgen.registry.parameter_type_registry import ParameterTypeRegistry
from stepgen.utils.exceptions import StepGenError
from stepgen.utils.logger import get_logger

logger = get_logger(__name__)


def parse_parameter_type(definition: str) -> ParameterType:
    """
    Parse a NAME=REGEX command line definition into a custom parameter type.

    Raises:
        argparse.ArgumentTypeError: If the definition has no '=' or an empty name.
        StepGenError: If the name or regexp is rejected by ParameterType.
    """
    name, separator, regexp = definition.partition("=")
    if not separator or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=REGEX, got {definition!r}")
    return ParameterType(name=name, regexps=regexp)


def build_registry(definitions: list[str]) -> ParameterTypeRegistry:
    """Build the default registry and register the custom definitions on top of it."""
    registry = build_default_registry()
    for definition in definitions:
        registry.register(parse_parameter_type(definition))
    return registry


def _summary(generated: GeneratedExpression, use_parameter_type_names: bool) -> dict:
    return {
        "text": generated.text,
        "expression": generated.render(use_parameter_type_names),
        "parameters": [
            {
                "name": parameter_name,
                "type": match.parameter_type.name,
                "start": match.start,
                "length": match.length,
                "value": generated.text[match.start:match.end],
            }
            for parameter_name, match in zip(generated.parameter_names, generated.matches)
        ],
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for expression generation."""
    parser = argparse.ArgumentParser(
        prog="stepgen-generate",
        description="Generate a step expression template from an example sentence.",
    )
    parser.add_argument(
        "text",
        help="Example step sentence, e.g. 'I have 2 cukes and 1.5 euro'",
    )
    typed_group = parser.add_mutually_exclusive_group()
    typed_group.add_argument(
        "--typed",
        dest="use_parameter_type_names",
        action="store_true",
        help="Render placeholders as {argN:type} (default from STEPGEN_USE_TYPE_NAMES)",
    )
    typed_group.add_argument(
        "--untyped",
        dest="use_parameter_type_names",
        action="store_false",
        help="Render placeholders as {argN}",
    )
    parser.add_argument(
        "--parameter-type", "-p",
        action="append",
        dest="parameter_types",
        default=[],
        metavar="NAME=REGEX",
        help="Register a custom parameter type (can be specified multiple times)",
    )
    parser.set_defaults(use_parameter_type_names=Config.USE_TYPE_NAMES)
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the expression and the selected parameters as JSON",
    )

    args = parser.parse_args(argv)
    logger.debug("Config: %s", Config.as_dict())
    # no line wrapping and no :emoji: code substitution in printed templates
    console = Console(emoji=False, soft_wrap=True)

    try:
        registry = build_registry(args.parameter_types)
    except (StepGenError, argparse.ArgumentTypeError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)

    generated = ExpressionGenerator(registry).generate(args.text)
    logger.debug("Generated %d parameters for %r", len(generated.matches), args.text)

    if args.json:
        output = json.dumps(_summary(generated, args.use_parameter_type_names), indent=2, ensure_ascii=False)
    else:
        output = generated.render(args.use_parameter_type_names)
    # templates contain braces and may contain brackets; print them verbatim
    console.print(output, markup=False, highlight=False)


if __name__ == "__main__":
    main()
