import sys
import logging

from typing import Optional

from . import (
    const,
    graph,
    tokens,  # noqa: F401 re-exported for callers working on raw tokens
    vt100,
)
from .args import Args, parse  # noqa: F401
from .model import Candidate, Snapshot  # noqa: F401

USAGE = f"{const.ARGV0} [-v|--verbose] [--json|--dot] [-m|--mark=NAME[,NAME...]] [-r|--render=PATH] [--] TOKENS..."


def ensure(version: tuple[int, int, int]):
    if (
        const.VERSION[0] == version[0]
        and const.VERSION[1] == version[1]
        and const.VERSION[2] >= version[2]
    ):
        return

    raise RuntimeError(
        f"Expected argkit version {version[0]}.{version[1]}.{version[2]} but found {const.VERSION_STR}"
    )


class logger:
    @staticmethod
    def setup(args: Args):
        if args.hasFlag(["-v", "--verbose"]):
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def usage():
    print(f"Usage: {USAGE}")


def _split(argv: list[str]) -> tuple[Args, Optional[list[str]]]:
    """Splits the command line into our own options and the inspected tokens."""
    if const.TERMINATOR in argv:
        i = argv.index(const.TERMINATOR)
        return Args(argv[:i]), argv[i + 1 :]
    return Args(argv), None


def dump(args: Args):
    vt100.title("Flags")
    flags = args.flags()
    if len(flags) == 0:
        print(vt100.empty())
    for name, count in flags.items():
        print(vt100.indent(vt100.flag(name, count)))
    print()

    vt100.title("Parameters")
    params = args.parameters()
    if len(params) == 0:
        print(vt100.empty())
    for name, value in params.items():
        print(vt100.indent(f"{name} = {value!r}"))
    print()

    vt100.title("Positionals")
    if len(args.candidates()) == 0:
        print(vt100.empty())
    index = 0
    for candidate in args.candidates():
        if candidate.live:
            print(vt100.indent(f"{index}: {candidate.value}"))
            index += 1
        elif candidate.claimed:
            print(vt100.indent(vt100.claimed(candidate.value, candidate.owner)))
    print()


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        own, inspected = _split(argv)
        logger.setup(own)

        if own.hasFlag(["-h", "--help"]):
            usage()
            return 0

        if own.hasFlag("--version"):
            print(f"argkit v{const.VERSION_STR}")
            return 0

        marks = own.getParameter(["-m", "--mark"])
        renderPath = own.getParameter(["-r", "--render"])

        args = Args(inspected if inspected is not None else own.positionals())
        if marks:
            args.markParameter([m for m in marks.split(",") if m])

        if own.hasFlag("--json"):
            print(args.snapshot().to_json(indent=2))
        elif own.hasFlag("--dot"):
            print(graph.build(args).source)
        else:
            dump(args)

        if renderPath:
            print(graph.render(args, renderPath))

        return 0

    except RuntimeError as e:
        logging.exception(e)
        vt100.error(str(e))
        usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
