import dataclasses as dt

from typing import Optional

from . import const

# --- Tokens ----------------------------------------------------------------- #


@dt.dataclass
class Token:
    """
    Base class for command-line argument tokens.
    """

    pass


@dt.dataclass
class OptionToken(Token):
    """
    Represents a single option.

    Attributes:
        name: The option name, dashes included (e.g., "-o" or "--output").
        value: The inline value for "--output=file", None otherwise.
    """

    name: str
    value: Optional[str] = None

    @property
    def long(self) -> bool:
        return self.name.startswith("--")

    @property
    def inline(self) -> bool:
        return self.value is not None


@dt.dataclass
class OperandToken(Token):
    """
    Represents a plain token, not an option.

    Attributes:
        value: The token, verbatim.
    """

    value: str


@dt.dataclass
class StdioToken(OperandToken):
    """
    A lone "-", by convention standard input or output.
    """

    value: str = const.STDIO


@dt.dataclass
class TerminatorToken(Token):
    """
    The "--" token, after which nothing is an option.
    """

    pass


# --- Scan ------------------------------------------------------------------- #


def isOption(arg: str) -> bool:
    """Checks if a raw token looks like an option."""
    return len(arg) >= 2 and arg[0] == "-" and arg != const.TERMINATOR


def parseArg(arg: str) -> list[Token]:
    """
    Parses a single command-line argument into a list of tokens.

    A short cluster such as "-abc" yields one option per letter. The
    value of an option is never fused to a short name: "-ofoo" is the
    four options "-o", "-f", "-o", "-o".
    """
    if arg == "":
        return []

    if arg == const.STDIO:
        return [StdioToken()]

    if arg == const.TERMINATOR:
        return [TerminatorToken()]

    if not isOption(arg):
        return [OperandToken(arg)]

    if const.ASSIGN in arg:
        name, value = arg.split(const.ASSIGN, 1)
        return [OptionToken(name, value)]

    if arg.startswith("--"):
        return [OptionToken(arg)]

    return [OptionToken(f"-{c}") for c in arg[1:]]

