"""Turns the raw argument list into the single action an invocation performs."""
import dataclasses
from collections.abc import Callable, Sequence
from importlib import metadata

import mdtouch.utils.io

PROGRAM_NAME = "mdtouch"
HELP_FLAGS = ("-h", "-?")

SUMMARY = (
    "A tool to update file timestamps or create empty files, "
    "mimicking the Unix touch command."
)


@dataclasses.dataclass(frozen=True)
class ShowHelp:
    pass


@dataclasses.dataclass(frozen=True)
class ShowSummary:
    pass


@dataclasses.dataclass(frozen=True)
class TouchPaths:
    paths: tuple[str, ...]


Action = ShowHelp | ShowSummary | TouchPaths


def interpret(args: Sequence[str]) -> Action:
    """Decide what an invocation does.

    No arguments shows the summary. A help flag anywhere in the list shows help
    and nothing is touched. Every other argument is a literal path, including
    unrecognized dash-prefixed tokens.
    """
    if not args:
        return ShowSummary()
    if any(arg in HELP_FLAGS for arg in args):
        return ShowHelp()
    return TouchPaths(tuple(args))


def build_stamp() -> str:
    if stamp := mdtouch.utils.io.getenv("MDTOUCH_BUILD_DATETIME"):
        return stamp
    try:
        return metadata.version(PROGRAM_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


def help_message() -> str:
    return (
        f"Usage: {PROGRAM_NAME} [OPTIONS] <file> [file...]\n"
        "\n"
        "A command line tool to mimic the behaviour of the Unix touch command on Windows.\n"
        "If the file does not exist, it will be created. Otherwise, its access and modification\n"
        "times will be updated to the current time.\n"
        "\n"
        "Options:\n"
        "  -h, -?      Display this help message and exit.\n"
    )


def summary_message() -> str:
    return f"{PROGRAM_NAME}  {build_stamp()}\n{SUMMARY}\n"


def render(action: Action, write: Callable[[str], None]) -> None:
    match action:
        case ShowHelp():
            write(help_message())
        case ShowSummary():
            write(summary_message())
        case TouchPaths():
            pass
