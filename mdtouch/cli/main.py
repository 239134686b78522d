import sys
import time

import rich.markup
from rich.console import Console

import mdtouch.utils.click as click
from mdtouch.cli.arg_parser import TouchPaths, interpret, render
from mdtouch.touch import TouchError, touch_all
from mdtouch.utils.logger import LOGGER

EXIT_FAILURE = 1


class RawArgsCommand(click.RichCommand):
    """Hands every token to the callback as `args`, including `--`."""

    def parse_args(self, ctx, args):
        ctx.params["args"] = tuple(args)
        return []


def _report_error(console: Console, error: TouchError):
    message = rich.markup.escape(f"Error touching {error.path}: {error.reason}")
    console.print(
        f"[red]{message}[/red]", soft_wrap=True, highlight=False, emoji=False
    )


@click.command(cls=RawArgsCommand, add_help_option=False)
def cli(args: tuple[str, ...]):
    """Create files, or update their access and modification times to now."""
    action = interpret(args)
    LOGGER.debug("Resolved action: %s", action)
    if not isinstance(action, TouchPaths):
        render(action, lambda text: click.echo(text, nl=False))
        return

    errors = touch_all(action.paths, now=time.time_ns())
    if not errors:
        return

    console = Console(stderr=True)
    for error in errors:
        _report_error(console, error)
    LOGGER.info("%d of %d paths failed", len(errors), len(action.paths))
    sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    cli()
