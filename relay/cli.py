from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

import relay.config as config_mod
import relay.plugin as plugin
from relay.errors import RelayError

console = Console()
err_console = Console(stderr=True)


def _fail(e: RelayError) -> None:
    err_console.print(f"[red]{escape(str(e))}[/red]")
    sys.exit(e.code or 1)


def _run(fn, *args) -> None:
    """Call an entry point and print its string, or report the error and exit."""
    try:
        output = fn(*args)
    except RelayError as e:
        _fail(e)
    click.echo(output)


def _load_store() -> dict[str, str]:
    try:
        return config_mod.load()
    except RelayError as e:
        _fail(e)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log configuration and request details.")
def main(verbose: bool) -> None:
    """relay: forward prompts to the OpenAI chat-completions API."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@main.command("complete")
@click.argument("prompt")
def cmd_complete(prompt: str) -> None:
    """Send PROMPT and print the reply. Use - to read the prompt from stdin."""
    if prompt == "-":
        prompt = sys.stdin.read()
    _run(plugin.completion, prompt)


@main.command("tools")
@click.argument("source", type=click.File("r"), default="-")
def cmd_tools(source) -> None:
    """Read {tools, messages} JSON from SOURCE and print the tool calls."""
    _run(plugin.completion_with_tools, source.read())


@main.command("models")
def cmd_models() -> None:
    """List supported models and their aliases as JSON."""
    _run(plugin.models)


@main.group("config")
def cmd_config() -> None:
    """Show or edit the plugin configuration store."""


@cmd_config.command("set")
@click.argument("key", type=click.Choice(config_mod.KEYS))
@click.argument("value")
def cmd_config_set(key: str, value: str) -> None:
    """Store VALUE under KEY."""
    store = _load_store()
    store[key] = value
    config_mod.save(store)
    console.print(f"[green]Saved {key} to {config_mod.config_file()}[/green]")


@cmd_config.command("show")
def cmd_config_show() -> None:
    """Print the stored configuration. The API key is masked."""
    store = _load_store()
    if not store:
        console.print(f"[yellow]No configuration at {config_mod.config_file()}[/yellow]")
        return
    for key in config_mod.KEYS:
        if key not in store:
            continue
        value = store[key]
        if key == "api_key":
            value = _mask(value)
        console.print(f"{key} = {escape(value)}")


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:3]}...{secret[-4:]}"
