"""waitstatus CLI - decode process wait statuses."""

import json
import logging

import click

from .config import load_config
from .errors import ConfigError, LayoutError, RunnerError
from .layout import AUTO, HOST_LAYOUT, LAYOUTS, get_layout
from .logging import setup_logging
from .obituary import ChildStatus, decode
from .runner import Runner

logger = logging.getLogger(__name__)

LAYOUT_CHOICES = [AUTO] + sorted(LAYOUTS)


class StatusParamType(click.ParamType):
    """Integer status accepting decimal, 0x hex, 0o octal or 0b binary."""

    name = "status"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return int(value, 0)
        except ValueError:
            self.fail(f"{value!r} is not a valid wait status", param, ctx)


STATUS = StatusParamType()


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _echo_status(result: ChildStatus, as_json: bool, err: bool = False) -> None:
    """Print a decoded status as JSON or as aligned key/value lines."""
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2), err=err)
        return

    lines = [
        ("status", f"{result.status:#06x} ({result.status})"),
        ("exited normally", _yes_no(result.exited)),
    ]
    if result.exited:
        lines.append(("exit code", str(result.exit_code)))
    lines.append(("terminated by signal", _yes_no(result.signaled)))
    if result.signaled:
        sig = str(result.signal)
        if result.signal_name:
            sig += f" ({result.signal_name})"
        lines.append(("terminating signal", sig))
        lines.append(("core dumped", _yes_no(result.core_dumped)))
    lines.append(("summary", result.describe()))

    width = max(len(key) for key, _ in lines) + 1
    for key, value in lines:
        click.echo(f"{key + ':':<{width}} {value}", err=err)


def _resolve_layout(ctx: click.Context, name: str | None):
    """Layout from the command line, falling back to the config file."""
    try:
        return get_layout(name or ctx.obj["config"].layout)
    except LayoutError as e:
        raise click.BadParameter(str(e), param_hint="--layout")


@click.group()
@click.pass_context
def cli(ctx):
    """Decode the status word returned by wait(), waitpid() and wait4()."""
    setup_logging()
    try:
        config = load_config()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command("decode")
@click.argument("status", type=STATUS)
@click.option("--layout", "layout_name", type=click.Choice(LAYOUT_CHOICES, case_sensitive=False),
              help="Host encoding to decode with (default: from config)")
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
@click.pass_context
def decode_command(ctx, status, layout_name, as_json):
    """Explain a raw wait status value."""
    layout = _resolve_layout(ctx, layout_name)
    as_json = as_json or ctx.obj["config"].json_output

    result = decode(status, layout)
    logger.debug(f"Decoded {status:#06x} with {layout.name} layout: {result.describe()}")
    _echo_status(result, as_json)


@cli.command("run", context_settings={"ignore_unknown_options": True,
                                      "allow_interspersed_args": False})
@click.option("--layout", "layout_name", type=click.Choice(LAYOUT_CHOICES, case_sensitive=False),
              help="Host encoding to decode with (default: from config)")
@click.option("--json", "as_json", is_flag=True, help="Report as JSON on stderr")
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run_command(ctx, layout_name, as_json, command):
    """Run COMMAND, report how it ended and exit with its status."""
    config = ctx.obj["config"]
    layout = _resolve_layout(ctx, layout_name)
    as_json = as_json or config.json_output

    if command and command[0] == "--":
        command = command[1:]

    try:
        result = Runner(layout=layout).run(list(command))
    except RunnerError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if as_json:
        _echo_status(result, as_json=True, err=True)
    elif not (result.exited and result.exit_code == 0):
        click.echo(f"waitstatus: {command[0]} {result.describe()}", err=True)

    if result.exited:
        ctx.exit(result.exit_code)
    if result.signaled:
        ctx.exit(config.signal_offset + result.signal)
    ctx.exit(1)


@cli.command("layouts")
def layouts_command():
    """List the known wait-status layouts."""
    for name in sorted(LAYOUTS):
        layout = LAYOUTS[name]
        marker = " (host)" if layout == HOST_LAYOUT else ""
        click.echo(
            f"{name}{marker}: signal_mask={layout.signal_mask:#04x} "
            f"core_flag={layout.core_flag:#04x} "
            f"exit=(status >> {layout.exit_shift}) & {layout.exit_mask:#04x}"
        )
