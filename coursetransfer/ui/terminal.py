"""
Terminal Display Implementation.

This module handles all console output for the transfer report.
It's the ONLY place where printing happens in the coursetransfer package.

The parsers, the counter and the report writer return data or raise; the
orchestrator decides what to tell the user and calls these methods.
"""

from ..engines import best_programs


class TerminalDisplay:
    """
    Progress, warning and error messages for a report run.

    To send messages somewhere else (a log file, a GUI), create a class with
    the same method signatures and hand it to TransferReporter.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    @classmethod
    def print_header(cls, title: str):
        """Print a section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_status(cls, message: str):
        """Print a progress line, e.g. "Reading file: programs.txt"."""
        print(f"  {cls.DIM}{message}{cls.RESET}")

    @classmethod
    def print_success(cls, message: str):
        print(f"  {cls.GREEN}✓ {message}{cls.RESET}")

    @classmethod
    def print_warning(cls, message: str):
        print(f"  {cls.YELLOW}⚠️  {message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        """Print an error message. Used instead of letting a traceback reach the user."""
        print(f"  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_summary(cls, courses: set, counts: dict):
        """
        Print per-program counts after a run.

        Programs tied for the highest count are highlighted.
        """
        cls.print_header("TRANSFER SUMMARY")
        print(f"  {cls.BOLD}Courses to transfer:{cls.RESET} {len(courses)}")
        print(f"  {cls.BOLD}Degree programs:{cls.RESET} {len(counts)}")
        print()

        top = set(best_programs(counts))
        name_width = max((len(name) for name in counts), default=0)

        for program_name in sorted(counts):
            count = counts[program_name]
            color = cls.GREEN if program_name in top else (cls.WHITE if count else cls.DIM)
            print(f"  {color}{program_name:<{name_width}}{cls.RESET}  {count}")
