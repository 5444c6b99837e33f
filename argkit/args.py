import sys
import logging
import dataclasses as dt

from typing import Iterable, Optional, Union

from . import tokens, utils
from .model import Candidate, Snapshot

_logger = logging.getLogger(__name__)

Names = Union[str, list[str], tuple[str, ...]]


class Args:
    """
    The classified form of a command-line argument list.

    Tokens are sorted, in a single pass, into three categories:

      * Flags: options present on the command line ("-h", "--verbose").
        Short options may be grouped, so "-hv" is "-h" and "-v".
      * Parameters: options bound to a value. The value is either joined
        with "=" ("--output=out.txt") or the bare token right after the
        option ("-o out.txt"). In a short cluster only the last letter can
        take the following token ("-vo out.txt" gives "-o" the value).
      * Positional arguments: everything else, in order. A lone "-" is
        positional, and so is everything after "--". Neither is ever an
        option's value, and both end the wait for one: in "-o - file",
        "-o" gets no value and "file" stays positional whatever is marked.

    A bare token following an option cannot be told apart from a
    positional argument at scan time ("prog -q file.txt"), so it is kept
    as both. The first call to `getParameter()` or `markParameter()` for
    the option settles it as a parameter, and the token leaves the
    positional list for good.

    Positional indices are therefore NOT stable: they shift down after
    any such call. Read your parameters first, then your positionals.

    No operation ever raises. Unknown names give False or "", and indices
    out of range give "".
    """

    _flags: dict[str, int]
    _params: dict[str, str]
    _candidates: list[Candidate]
    _marked: list[str]
    _raw: list[str]
    _live: Optional[list[str]]

    def __init__(self, args: Iterable[str] = ()):
        self._flags = {}
        self._params = {}
        self._candidates = []
        self._marked = []
        self._raw = []
        self._live = None
        self._classify(args)

    @staticmethod
    def fromArgv(argv: Optional[list[str]] = None) -> "Args":
        """
        Classifies a process argument vector.

        The program name is kept, so it is positional 0.

        Args:
            argv: The argument vector, defaults to sys.argv.
        """
        if argv is None:
            argv = sys.argv
        return Args(argv)

    @staticmethod
    def fromArgc(argc: int, argv: list[str]) -> "Args":
        """
        Classifies the first `argc` entries of `argv`.

        `argc` is clamped to the length of `argv`.
        """
        argc = max(0, min(argc, len(argv)))
        return Args(argv[:argc])

    # --- Scan --------------------------------------------------------------- #

    def _flag(self, name: str):
        self._flags[name] = self._flags.get(name, 0) + 1

    def _push(self, value: str, owner: Optional[str]):
        self._candidates.append(Candidate(value, owner, len(self._raw) - 1))

    def _classify(self, args: Iterable[str]):
        terminated = False
        pending: Optional[str] = None

        for arg in args:
            if arg == "":
                continue

            self._raw.append(arg)

            if terminated:
                self._push(arg, None)
                continue

            for tok in tokens.parseArg(arg):
                if isinstance(tok, tokens.TerminatorToken):
                    terminated = True
                    pending = None
                elif isinstance(tok, tokens.StdioToken):
                    self._push(tok.value, None)
                    pending = None
                elif isinstance(tok, tokens.OptionToken):
                    self._flag(tok.name)
                    if tok.value is not None:
                        self._params[tok.name] = tok.value
                        pending = None
                    else:
                        pending = tok.name
                elif isinstance(tok, tokens.OperandToken):
                    if pending is not None:
                        self._params[pending] = tok.value
                    self._push(tok.value, pending)
                    pending = None

        _logger.debug(
            f"Classified {len(self._raw)} tokens: {len(self._flags)} flags, {len(self._params)} parameters, {len(self._candidates)} candidates"
        )

    # --- Flags -------------------------------------------------------------- #

    def hasFlag(self, names: Names) -> bool:
        """
        Checks if an option is present.

        Args:
            names: An option name ("-h") or a list of aliases (["-h", "--help"]).

        Returns:
            True if any of the names occurred, False otherwise.
        """
        return any(name in self._flags for name in utils.asList(names))

    def count(self, names: Names) -> int:
        """Returns how many times an option (or any of its aliases) occurred."""
        return sum(self._flags.get(name, 0) for name in utils.uniq(utils.asList(names)))

    def flags(self) -> dict[str, int]:
        return dict(self._flags)

    # --- Parameters --------------------------------------------------------- #

    def lookupParameter(self, names: Names) -> Optional[str]:
        """
        Returns the value of an option without committing to it.

        The positional list is left untouched.

        Args:
            names: An option name or a list of aliases; the first alias
                holding a value wins.

        Returns:
            The value, or None if the option never got one.
        """
        for name in utils.asList(names):
            if name in self._params:
                return self._params[name]
        return None

    def markParameter(self, names: Names):
        """
        Commits an option (or each of its aliases) as a parameter.

        The token that followed the option leaves the positional list.
        Marking twice, or marking a name that never occurred, does nothing.
        """
        for name in utils.asList(names):
            if name in self._marked or name not in self._flags:
                continue

            self._marked.append(name)
            removed = 0
            for candidate in self._candidates:
                if candidate.live and candidate.owner == name:
                    candidate.live = False
                    removed += 1

            if removed > 0:
                self._live = None
                _logger.debug(f"Marked '{name}' as a parameter, {removed} positional(s) dropped")

    def getParameter(self, names: Names) -> str:
        """
        Returns the value of an option and commits it as a parameter.

        This is `lookupParameter()` followed by `markParameter()`: reading a
        parameter shifts the positional arguments that follow its value.

        Returns:
            The value, or "" if the option never got one.
        """
        value = self.lookupParameter(names)
        self.markParameter(names)
        return value if value is not None else ""

    def isMarked(self, name: str) -> bool:
        return name in self._marked

    def parameters(self) -> dict[str, str]:
        return dict(self._params)

    # --- Positionals -------------------------------------------------------- #

    def _view(self) -> list[str]:
        if self._live is None:
            self._live = [c.value for c in self._candidates if c.live]
        return self._live

    def positional(self, index: int) -> str:
        """
        Returns the positional argument at `index` in the current list.

        Returns:
            The argument, or "" if the index is out of range (negative
            indices included).
        """
        view = self._view()
        if index < 0 or index >= len(view):
            return ""
        return view[index]

    def positionalCount(self) -> int:
        return len(self._view())

    def positionals(self) -> list[str]:
        return list(self._view())

    # --- Introspection ------------------------------------------------------ #

    def candidates(self) -> list[Candidate]:
        """Returns copies of every candidate, claimed ones included."""
        return [dt.replace(c) for c in self._candidates]

    def raw(self) -> list[str]:
        return list(self._raw)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            flags=self.flags(),
            parameters=self.parameters(),
            positionals=self.positionals(),
            marked=list(self._marked),
            raw=self.raw(),
            candidates=self.candidates(),
        )

    # --- Operators ---------------------------------------------------------- #

    def __getitem__(self, key: Union[int, Names]) -> Union[bool, str]:
        if isinstance(key, int) and not isinstance(key, bool):
            return self.positional(key)
        return self.hasFlag(key)

    def __call__(self, names: Names) -> str:
        return self.getParameter(names)

    def __len__(self) -> int:
        return self.positionalCount()

    def __repr__(self) -> str:
        return f"Args(flags={self._flags!r}, parameters={self._params!r}, positionals={self._view()!r})"


def parse(args: Iterable[str]) -> Args:
    """Classifies a list of command-line arguments, without a program name."""
    return Args(args)
