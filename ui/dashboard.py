"""Real-time CLI dashboard for relay monitoring."""

from datetime import datetime
from threading import Lock

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from ui.log_utils import write_cli_log

console = Console()


class RelayInfo:
    """Info about a single completed relay."""

    def __init__(
        self,
        route: str,
        url: str,
        status: int,
        sent_bytes: int,
        received_bytes: int,
        timestamp: datetime,
    ):
        self.route = route
        self.url = url[:60] + "..." if len(url) > 60 else url
        self.status = status
        self.sent_bytes = sent_bytes
        self.received_bytes = received_bytes
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing recent relays and errors."""

    def __init__(self, config: Config):
        self.config = config
        self._lock = Lock()
        self._relays: list[RelayInfo] = []
        self._max_relays = 8
        self._request_count = {"image": 0, "zip": 0}
        self._error_count = 0
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    def log_relay(
        self,
        route: str,
        url: str,
        status: int,
        *,
        sent_bytes: int,
        received_bytes: int,
    ) -> None:
        """Log a successful relay."""
        with self._lock:
            self._request_count[route] = self._request_count.get(route, 0) + 1
            info = RelayInfo(route, url, status, sent_bytes, received_bytes, datetime.now())
            self._relays.insert(0, info)
            self._relays = self._relays[: self._max_relays]
            self._refresh()
            write_cli_log(
                "RELAY",
                url,
                route=route,
                status=status,
                sent=sent_bytes,
                received=received_bytes,
            )

    def log_error(self, route: str, status: int, message: str) -> None:
        """Log an error."""
        with self._lock:
            self._error_count += 1
            truncated = message[:50] + "..." if len(message) > 50 else message
            self._errors.insert(0, f"{route} {status}: {truncated}")
            self._errors = self._errors[:3]
            self._refresh()
            write_cli_log("ERROR", message[:200], route=route, status=status)

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        """Build the dashboard layout."""
        layout = Layout()

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=5),
        )

        layout["header"].update(self._build_header())
        layout["body"].update(self._build_relays_panel())
        layout["footer"].update(self._build_footer())

        return layout

    def _build_header(self) -> Panel:
        """Build header with stats."""
        stats = Text()
        stats.append("Payload Relay", style="bold cyan")
        stats.append("  |  ")
        stats.append(f"Image: {self._request_count['image']}", style="blue")
        stats.append("  |  ")
        stats.append(f"Zip: {self._request_count['zip']}", style="magenta")
        stats.append("  |  ")
        stats.append(f"Errors: {self._error_count}", style="red")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.server.port}", style="dim")

        return Panel(stats, style="cyan")

    def _build_relays_panel(self) -> Panel:
        """Build recent relays panel."""
        if self._relays:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column("Route", width=6)
            table.add_column("Upstream", ratio=3)
            table.add_column("Status", width=6)
            table.add_column("Sent", justify="right", ratio=1)
            table.add_column("Received", justify="right", ratio=1)

            for relay in self._relays:
                table.add_row(
                    relay.timestamp.strftime("%H:%M:%S"),
                    relay.route,
                    relay.url,
                    str(relay.status),
                    _format_bytes(relay.sent_bytes),
                    _format_bytes(relay.received_bytes),
                )

            content = table
        else:
            content = Text("Waiting for requests...", style="dim")

        return Panel(content, title="[blue]Recent Relays[/blue]", border_style="blue")

    def _build_footer(self) -> Panel:
        """Build footer with errors and help."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        else:
            content = Text(
                f"POST to http://localhost:{self.config.server.port}/api/invert-image "
                "or /api/zip-files",
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")


def _format_bytes(count: int) -> str:
    if count < 1024:
        return f"{count} B"
    if count < 1024 * 1024:
        return f"{count / 1024:.1f} KB"
    return f"{count / (1024 * 1024):.1f} MB"
