import colorama
from colorama import Fore, Style

from .settings import BANNER, ENTRY_DELIMITER, SEPARATOR

colorama.init(autoreset=True)


def format_entry(key: str, value: str) -> str:
    """Return the ``KEY  :  VALUE`` line shown for one stored variable."""
    return f"{key}{ENTRY_DELIMITER}{value}"


def print_listing(values: dict[str, str]) -> None:
    """Print a bordered listing of ``values`` sorted by key."""
    print(f"{Fore.CYAN}{BANNER}{Style.RESET_ALL}")
    print(SEPARATOR)
    for key in sorted(values):
        print(format_entry(key, values[key]))
    print(SEPARATOR)

__all__ = ["format_entry", "print_listing"]
