"""awesome status-server - Kubernetes pod status proxy."""

import click
from rich.console import Console

from .context import AppContext, pass_app

console = Console()


@click.command("status-server")
@click.option("--host", default=None, help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: 8081)")
@pass_app
def status_server(app: AppContext, host, port):
    """Serve pod statuses as JSON on /status."""
    try:
        from awesome.web.status import create_app
        flask_app = create_app()
    except ImportError:
        console.print("[red]Flask is not installed.[/red]")
        console.print("Install with: pip install flask")
        raise SystemExit(1)

    settings = app.config.status_server
    host = host or settings.host
    port = port or settings.port

    console.print("[bold]Pod Status Proxy[/bold]")
    console.print(f"  URL: http://{host}:{port}/status")
    flask_app.run(host=host, port=port)
