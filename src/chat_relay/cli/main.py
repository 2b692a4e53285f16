"""Main CLI entry point for Chat Relay.

Provides commands for talking to the configured chat-completions API:
    chat-relay ask <message> [--config PATH] [--log-level LEVEL]
    chat-relay chat [--config PATH] [--log-level LEVEL]
    chat-relay config show [--config PATH] [--log-level LEVEL]

--config and --log-level are accepted both before the command name and
after it; the per-command value wins.
"""

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from .. import __version__
from ..llm import CompletionHandler, RelayError, create_handler, load_config

EXIT_COMMAND = "/exit"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIG_PATH_TYPE = click.Path(exists=True, dir_okay=False, path_type=Path)
_LOG_LEVEL_TYPE = click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False)


def configure_logging(log_level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, log_level.upper()))


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --config and --log-level to a command, overriding the group's values."""
    func = click.option(
        "--log-level",
        type=_LOG_LEVEL_TYPE,
        default=None,
        help="Logging verbosity (overrides the global option)",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=_CONFIG_PATH_TYPE,
        default=None,
        help="YAML config file (overrides the global option)",
    )(func)
    return func


def _apply_options(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    ctx.ensure_object(dict)
    if config_path is not None:
        ctx.obj["config_path"] = config_path
    if log_level is not None:
        configure_logging(log_level)


def _build_handler(ctx: click.Context) -> CompletionHandler:
    """Create a handler from the resolved --config option, or exit on error."""
    try:
        return create_handler(config_path=ctx.obj.get("config_path"))
    except RelayError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="chat-relay")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=_CONFIG_PATH_TYPE,
    help="YAML config file (environment variables take precedence)",
)
@click.option(
    "--log-level",
    type=_LOG_LEVEL_TYPE,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str) -> None:
    """Chat Relay - talk to a chat-completions API from the terminal.

    Every message is sent together with the conversation so far. Send
    /clear to start over.

    \b
    Configuration:
        OPENAI_API_KEY          API key (required)
        OPENAI_MODEL            Model (default: gpt-3.5-turbo)
        OPENAI_CHAT_ENDPOINT    Chat-completions URL
        OPENAI_TIMEOUT_SECONDS  Request deadline
    """
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# =============================================================================
# Ask Command
# =============================================================================


@cli.command()
@click.argument("message")
@common_options
@click.pass_context
def ask(
    ctx: click.Context, message: str, config_path: Path | None, log_level: str | None
) -> None:
    """Send a single message and print the reply.

    \b
    Examples:
        chat-relay ask "Summarize the plot of Hamlet"
        chat-relay ask "Hello" --config relay.yaml
    """
    _apply_options(ctx, config_path, log_level)
    with _build_handler(ctx) as handler:
        try:
            reply = handler.complete(message)
        except RelayError as e:
            click.echo(f"Error: {e}")
            sys.exit(1)
    click.echo(reply)


# =============================================================================
# Chat Command
# =============================================================================


@cli.command()
@common_options
@click.pass_context
def chat(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Start an interactive conversation.

    Each line is trimmed before it is sent. Type /clear to reset the
    context and /exit (or Ctrl-D) to leave. Errors are reported and the
    session continues.
    """
    _apply_options(ctx, config_path, log_level)
    with _build_handler(ctx) as handler:
        click.echo(f"Chatting with {handler.config.model}. /clear resets, /exit quits.")
        while True:
            try:
                line = click.prompt("you", default="", show_default=False, prompt_suffix="> ")
            except click.Abort:
                click.echo()
                break

            message = line.strip()
            if not message:
                continue
            if message.lower() == EXIT_COMMAND:
                break

            try:
                reply = handler.complete(message)
            except RelayError as e:
                click.echo(f"Error: {e}")
                continue
            click.echo(reply)


# =============================================================================
# Config Commands
# =============================================================================


@cli.group()
def config() -> None:
    """Inspect relay configuration."""
    pass


@config.command("show")
@click.option(
    "--format", "-f", "output_format", type=click.Choice(["text", "json"]), default="text"
)
@common_options
@click.pass_context
def config_show(
    ctx: click.Context, output_format: str, config_path: Path | None, log_level: str | None
) -> None:
    """Show the resolved configuration with the API key masked.

    \b
    Examples:
        chat-relay config show
        chat-relay config show --config relay.yaml --format json
    """
    _apply_options(ctx, config_path, log_level)
    try:
        resolved = load_config(ctx.obj.get("config_path"))
    except RelayError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)

    data = resolved.model_dump(mode="json")
    data["api_key"] = "********" if resolved.has_api_key else None

    if output_format == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        for key, value in data.items():
            click.echo(f"{key + ':':<24} {'(not set)' if value is None else value}")


if __name__ == "__main__":
    cli()
