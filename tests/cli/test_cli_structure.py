# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import argparse
import importlib
import json

import pytest


def _get_subparser_names(parser: argparse.ArgumentParser) -> set[str]:
    subparser_actions = [
        action
        for action in parser._actions
        if isinstance(action, argparse._SubParsersAction)
    ]
    if not subparser_actions:
        raise AssertionError("expected at least one subparser action")
    names: set[str] = set()
    for action in subparser_actions:
        names.update(action.choices.keys())
    return names


CHAIN = """
validators:
  required: {}
  integer: {}
"""


def test_build_parser_registers_expected_commands():
    cli_main = importlib.import_module("okey.cli.main")
    parser = cli_main.build_parser()
    assert {"list", "validate"}.issubset(_get_subparser_names(parser))


def test_run_command_invokes_callable():
    cli_main = importlib.import_module("okey.cli.main")

    called = {}

    def fake(args):
        called["args"] = args
        return 0

    namespace = argparse.Namespace(func=fake, value="ok")

    assert cli_main.run_command(namespace) == 0
    assert called["args"].value == "ok"


def test_validate_parser_accepts_options():
    cli_main = importlib.import_module("okey.cli.main")
    parser = cli_main.build_parser()
    args = parser.parse_args(["validate", "--config", "chain.yaml", "--no-break-on-error", "--json", "1", "2"])
    assert args.config == "chain.yaml"
    assert args.no_break_on_error is True
    assert args.as_json is True
    assert args.values == ["1", "2"]


def test_list_prints_builtins(capsys):
    cli_main = importlib.import_module("okey.cli.main")

    assert cli_main.main(["list"]) == 0

    out = capsys.readouterr().out
    for name in ("required", "minLength", "isNumber", "integer", "range"):
        assert name in out
    assert "end, start" in out


def test_validate_success_exit_code(chain_file, capsys):
    cli_main = importlib.import_module("okey.cli.main")

    code = cli_main.main(["validate", "--config", str(chain_file(CHAIN)), "42"])

    assert code == 0
    assert "ok -> 42" in capsys.readouterr().out


def test_validate_failure_exit_code(chain_file, capsys):
    cli_main = importlib.import_module("okey.cli.main")

    code = cli_main.main(["validate", "--config", str(chain_file(CHAIN)), "42", "abc"])

    assert code == 1
    assert "error_message_abc_is_not_an_integer" in capsys.readouterr().out


def test_validate_json_output(chain_file, capsys):
    cli_main = importlib.import_module("okey.cli.main")

    code = cli_main.main(
        ["validate", "--config", str(chain_file(CHAIN)), "--no-break-on-error", "--json", "", "7"]
    )

    assert code == 1
    reports = json.loads(capsys.readouterr().out)
    assert reports[0] == {
        "input": "",
        "value": "",
        "errors": ["error_message_required", "error_message__is_not_an_integer"],
        "has_error": True,
    }
    assert reports[1] == {"input": "7", "value": 7, "errors": [], "has_error": False}


@pytest.mark.parametrize(
    "content",
    [
        "validators:\n  bogus: {}\n",
        "validators:\n  range: {start: 1}\n",
    ],
)
def test_configuration_errors_exit_with_2(chain_file, capsys, content):
    cli_main = importlib.import_module("okey.cli.main")

    code = cli_main.main(["validate", "--config", str(chain_file(content)), "1"])

    assert code == 2
    assert capsys.readouterr().err.startswith("okey: ")


def test_validate_uses_chain_file_environment(chain_file, monkeypatch, capsys):
    cli_main = importlib.import_module("okey.cli.main")
    monkeypatch.setenv("OKEY_CHAIN_FILE", str(chain_file(CHAIN)))

    assert cli_main.main(["validate", "5"]) == 0
