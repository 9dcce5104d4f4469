"""Simple console output helpers for the ds-scaffold CLI."""


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


_quiet = False


def set_quiet(quiet: bool) -> None:
    """Silence header/info/success output. Warnings and errors always print."""
    global _quiet
    _quiet = quiet


def print_header(msg: str) -> None:
    """Print a header message."""
    if not _quiet:
        print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.RESET}")


def print_info(msg: str) -> None:
    """Print an info message."""
    if not _quiet:
        print(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    """Print a success message."""
    if not _quiet:
        print(f"{Colors.GREEN}✓ {msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print an error message."""
    print(f"{Colors.RED}❌ {msg}{Colors.RESET}")
