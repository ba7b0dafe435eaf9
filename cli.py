"""CLI entry point for payload-relay."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from core.config import CONFIG_FILE, load_config
from ui.dashboard import Dashboard
from ui.log_utils import LOG_ROOT, clear_logs, write_cli_log

console = Console()


def main():
    """Main CLI entry point."""
    # Handle CLI arguments
    if len(sys.argv) > 1:
        arg = sys.argv[1]

        if arg == "--config":
            console.print(f"[bold]Config:[/bold] {CONFIG_FILE}")
            console.print(f"[bold]Logs:[/bold] {LOG_ROOT}")
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

        console.print(f"[red][ERROR][/red] Unknown argument: {arg}")
        _print_help()
        sys.exit(2)

    config = load_config()

    # Clear previous logs and start dashboard
    clear_logs()
    dashboard = Dashboard(config)

    import uvicorn

    app = create_app(config, dashboard)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level="warning",
        timeout_keep_alive=config.server.keep_alive_timeout,
    )
    server = uvicorn.Server(uvicorn_config)

    dashboard.start()
    start_time = datetime.now()
    write_cli_log("STARTUP", "Relay started", port=config.server.port)
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", "Relay stopped", duration=str(duration))
        dashboard.stop()


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]Payload Relay[/bold cyan]

Forwards base64 payloads from JSON clients to upstream HTTP endpoints.

[bold]Usage:[/bold]
    payload-relay              Start with live dashboard
    payload-relay --config     Show config and log locations
    payload-relay --help       Show this help

[bold]Endpoints:[/bold]
    POST /api/invert-image     {url, payload, contentType?} -> {result, contentType}
    POST /api/zip-files        {url, files: [{filename, content}]} -> {zip, filename}
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
