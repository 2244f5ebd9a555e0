"""
Output - Console output formatting.

Provides pretty-printed output with colors and formatting.
"""

import sys

from ..application.sync import SyncResult


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"

    BG_YELLOW = "\033[43m"


class Symbols:
    """Unicode symbols for output."""

    CHECK = "✓"
    CROSS = "✗"
    ARROW = "→"
    WARN = "⚠"
    INFO = "ℹ"
    GEAR = "⚙"
    BOX_H = "─"


class Console:
    """Console output helper with colors and formatting."""

    def __init__(self, color: bool = True, verbose: bool = False):
        self.color = color and sys.stdout.isatty()
        self.verbose = verbose

    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def print(self, text: str = "") -> None:
        print(text)

    def header(self, text: str) -> None:
        width = max(len(text) + 4, 50)
        border = self._c(Symbols.BOX_H * width, Colors.CYAN) if self.color else "-" * width

        self.print()
        self.print(border)
        self.print(self._c(f"  {text}", Colors.BOLD, Colors.CYAN))
        self.print(border)
        self.print()

    def section(self, text: str) -> None:
        self.print()
        self.print(self._c(f"{Symbols.ARROW} {text}", Colors.BOLD, Colors.BLUE))

    def success(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CHECK} {text}", Colors.GREEN))

    def error(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CROSS} {text}", Colors.RED))

    def info(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.INFO} {text}", Colors.CYAN))

    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self.print(self._c(f"    {text}", Colors.DIM))

    def table(self, headers: list[str], rows: list[list[str]]) -> None:
        """Print a simple table."""
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))

        header_line = "  " + "  ".join(
            self._c(h.ljust(widths[i]), Colors.BOLD)
            for i, h in enumerate(headers)
        )
        self.print(header_line)
        self.print("  " + "  ".join("-" * w for w in widths))

        for row in rows:
            self.print("  " + "  ".join(
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            ))

    def progress(self, current: int, total: int, message: str = "") -> None:
        """Print progress bar."""
        if total <= 0:
            return
        width = 30
        filled = int(width * current / total)
        bar = "█" * filled + "░" * (width - filled)
        pct = int(100 * current / total)

        sys.stdout.write(f"\r  [{bar}] {pct}% {message[:40]:<40}")
        sys.stdout.flush()

        if current >= total:
            self.print()

    def dry_run_banner(self) -> None:
        self.print()
        banner = f"  {Symbols.GEAR} DRY-RUN MODE - No changes will be made"
        if self.color:
            self.print(f"{Colors.BG_YELLOW}{Colors.BOLD}{banner}{Colors.RESET}")
        else:
            self.print(f"*** {banner} ***")
        self.print()

    def sync_result(self, result: SyncResult) -> None:
        """Print sync result summary."""
        self.section("Sync Summary")
        self.print()

        if result.dry_run:
            self.info("Mode: DRY-RUN (no changes made)")
        else:
            self.info("Mode: LIVE EXECUTION")

        self.print()

        if result.dry_run:
            stats = [
                ["Items", str(result.items_total)],
                ["Items To Sync", str(result.items_synced)],
                ["Already Recorded", str(result.items_recorded)],
                ["Comments To Add", str(result.comments_added)],
                ["Issues To Create", str(result.issues_created)],
                ["Duplicates To Close", str(result.duplicates_closed)],
            ]
        else:
            stats = [
                ["Items", str(result.items_total)],
                ["Items Synced", str(result.items_synced)],
                ["Already Recorded", str(result.items_recorded)],
                ["Comments Added", str(result.comments_added)],
                ["Issues Created", str(result.issues_created)],
                ["Duplicates Closed", str(result.duplicates_closed)],
            ]
        self.table(["Metric", "Count"], stats)

        if self.verbose and result.created_issues:
            self.print()
            self.info("New issues:")
            for source_id, number in result.created_issues:
                if result.dry_run or number is None:
                    self.detail(f"{source_id} (not filed)")
                else:
                    self.detail(f"{source_id} → #{number}")

        if result.errors:
            self.print()
            self.error(f"{len(result.errors)} error(s):")
            for e in result.errors[:5]:
                self.detail(e)
            if len(result.errors) > 5:
                self.detail(f"... and {len(result.errors) - 5} more")

        self.print()
        if result.success:
            self.success("Sync completed successfully!")
        else:
            self.error("Sync completed with errors")

    def confirm(self, message: str) -> bool:
        """Ask for confirmation."""
        prompt = self._c(f"\n{Symbols.WARN} {message} (y/N): ", Colors.YELLOW)
        try:
            response = input(prompt).strip().lower()
            return response in ("y", "yes")
        except (EOFError, KeyboardInterrupt):
            self.print()
            return False
