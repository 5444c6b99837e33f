import sys


RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
WHITE = "\033[37m"
YELLOW = "\033[33m"
BRIGHT_BLACK = "\033[90m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
CROSSED = "\033[9m"
RESET = "\033[0m"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str):
    print(f"{BOLD+WHITE+UNDERLINE}{text}{RESET}")


def empty(text: str = "(None)") -> str:
    return indent(f"{BRIGHT_BLACK}{text}{RESET}")


def flag(name: str, count: int = 1) -> str:
    if count > 1:
        return f"{GREEN}{name}{RESET} {BRIGHT_BLACK}x{count}{RESET}"
    return f"{GREEN}{name}{RESET}"


def claimed(value: str, owner: str) -> str:
    return f"{CROSSED+BRIGHT_BLACK}{value}{RESET} {BRIGHT_BLACK}(claimed by {owner}){RESET}"


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
