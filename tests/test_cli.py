from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from relay.cli import main

from conftest import chat_response


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def configured(config_file):
    config_file.write_text('[plugin]\napi_key = "sk-cli-secret-key"\n')
    return config_file


def test_models(runner):
    result = runner.invoke(main, ["models"])
    assert result.exit_code == 0
    assert json.loads(result.output)[0]["name"] == "gpt-4o"


def test_complete(runner, configured, api):
    api["completions"].respond(200, json=chat_response({"role": "assistant", "content": "pong"}))
    result = runner.invoke(main, ["complete", "ping"])
    assert result.exit_code == 0
    assert result.output.strip() == "pong"


def test_complete_from_stdin(runner, configured, api):
    route = api["completions"].respond(200, json=chat_response({"role": "assistant", "content": "ok"}))
    result = runner.invoke(main, ["complete", "-"], input="from stdin")
    assert result.exit_code == 0
    assert json.loads(route.calls.last.request.content)["messages"][1]["content"] == "from stdin"


def test_complete_without_api_key_exits_1(runner, config_file, api):
    result = runner.invoke(main, ["complete", "ping"])
    assert result.exit_code == 1
    assert "API key not found" in result.output
    assert not api["completions"].called


def test_tools_from_stdin(runner, configured, api):
    message = {
        "role": "assistant",
        "tool_calls": [{"id": "1", "type": "function", "function": {"name": "t", "arguments": "{}"}}],
    }
    api["completions"].respond(200, json=chat_response(message))
    payload = {
        "tools": [{"name": "t", "input_schema": {"type": "object", "properties": {}, "required": []}}],
        "messages": [{"role": "user", "content": "go"}],
    }
    result = runner.invoke(main, ["tools"], input=json.dumps(payload))
    assert result.exit_code == 0
    assert json.loads(result.output) == [{"name": "t", "input": {}}]


def test_api_error_exits_nonzero(runner, configured, api):
    api["completions"].respond(429, text="slow down")
    result = runner.invoke(main, ["complete", "ping"])
    assert result.exit_code == 1
    assert "429" in result.output


def test_config_set_and_show_masks_key(runner, config_file):
    assert runner.invoke(main, ["config", "set", "api_key", "sk-cli-secret-key"]).exit_code == 0
    assert runner.invoke(main, ["config", "set", "model", "4o"]).exit_code == 0

    result = runner.invoke(main, ["config", "show"])
    assert result.exit_code == 0
    assert "sk-cli-secret-key" not in result.output
    assert "model = 4o" in result.output


def test_config_set_rejects_unknown_key(runner, config_file):
    result = runner.invoke(main, ["config", "set", "colour", "blue"])
    assert result.exit_code != 0
    assert not config_file.exists()


def test_malformed_config_file_exits_1(runner, config_file, api):
    config_file.write_text("[plugin\napi_key = ")
    result = runner.invoke(main, ["complete", "hi"])
    assert result.exit_code == 1
    assert "Invalid config file" in result.output
    assert not api["completions"].called


def test_config_set_on_malformed_file_exits_1(runner, config_file):
    config_file.write_text("[plugin\napi_key = ")
    result = runner.invoke(main, ["config", "set", "model", "4o"])
    assert result.exit_code == 1
    assert "Invalid config file" in result.output
