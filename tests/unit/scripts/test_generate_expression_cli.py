"""
tests/unit/scripts/test_generate_expression_cli.py

Unit tests for the stepgen-generate command line script.
"""

import argparse
import json

import pytest

from stepgen.scripts.generate_expression import build_registry, main, parse_parameter_type
from stepgen.utils.exceptions import NameCollisionError, NameLegalityError


class TestParseParameterType:
    """Tests for parse_parameter_type()."""

    def test_name_and_regexp(self) -> None:
        parameter_type = parse_parameter_type("currency=[A-Z]{3}")
        assert parameter_type.name == "currency"
        assert parameter_type.regexps == ("[A-Z]{3}",)
        assert parameter_type.builtin is False

    def test_regexp_may_contain_equals(self) -> None:
        assert parse_parameter_type("eq=a=b").regexps == ("a=b",)

    @pytest.mark.parametrize("definition", ["currency", "=[A-Z]{3}"])
    def test_malformed_definition(self, definition: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_parameter_type(definition)

    def test_illegal_name(self) -> None:
        with pytest.raises(NameLegalityError):
            parse_parameter_type("a{b=x")


class TestBuildRegistry:
    """Tests for build_registry()."""

    def test_custom_types_on_top_of_builtins(self) -> None:
        registry = build_registry(["currency=[A-Z]{3}"])
        assert "int" in registry
        assert "currency" in registry

    def test_builtin_collision(self) -> None:
        with pytest.raises(NameCollisionError):
            build_registry(["int=[0-9]+"])


class TestMain:
    """Tests for main()."""

    def test_typed(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["I have 2 cukes and 1.5 euro", "--typed"])
        assert capsys.readouterr().out.strip() == "I have {arg1:int} cukes and {arg2:double} euro"

    def test_untyped(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["I have 2 cukes and 1.5 euro", "--untyped"])
        assert capsys.readouterr().out.strip() == "I have {arg1} cukes and {arg2} euro"

    def test_custom_type(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["I have a EUR account", "--typed", "-p", "currency=[A-Z]{3}"])
        assert capsys.readouterr().out.strip() == "I have a {arg1:currency} account"

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["I have 2 cukes", "--typed", "--json"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["expression"] == "I have {arg1:int} cukes"
        assert payload["parameters"] == [
            {"name": "arg1", "type": "int", "start": 7, "length": 1, "value": "2"},
        ]

    def test_invalid_custom_type_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["text", "-p", "a/b=x"])
        assert exc_info.value.code == 1
        assert "Illegal character" in capsys.readouterr().out

    def test_long_template_is_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        tail = "and a very long tail of words " * 4
        main([f"I have 2 cukes and 3 gherkins {tail}then 4 more", "--typed"])
        expected = f"I have {{arg1:int}} cukes and {{arg2:int}} gherkins {tail}then {{arg3:int}} more"
        assert len(expected) > 120
        assert capsys.readouterr().out == expected + "\n"

    def test_emoji_codes_pass_through(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["I click the :x: button 2 times", "--typed"])
        assert capsys.readouterr().out == "I click the :x: button {arg1:int} times\n"

    def test_json_keeps_emoji_codes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["I click the :x: button 2 times", "--untyped", "--json"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["text"] == "I click the :x: button 2 times"
        assert payload["expression"] == "I click the :x: button {arg1} times"
