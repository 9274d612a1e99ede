"""Typer CLI for DeviceHub."""

import asyncio

import typer
from rich.console import Console

app = typer.Typer(name="devicehub", help="DeviceHub: tenant, user, device and app registry")
console = Console()


@app.command()
def serve(
    host: str = typer.Option(None, help="Bind host (default: DEVICEHUB_HOST)"),
    port: int = typer.Option(None, help="Bind port (default: DEVICEHUB_PORT)"),
):
    """Start the DeviceHub API server."""
    import uvicorn
    from devicehub.app import create_app
    from devicehub.common.config import get_settings

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    console.print(f"[bold green]Starting DeviceHub on {host}:{port}[/bold green]")
    uvicorn.run(create_app(settings), host=host, port=port)


@app.command("init-db")
def init_db():
    """Create any missing tables in the configured database."""
    from devicehub.common.database import Database

    async def _create() -> None:
        db = Database()
        await db.init()
        try:
            await db.create_all()
        finally:
            await db.close()

    asyncio.run(_create())
    console.print("[bold green]Database schema is up to date[/bold green]")


@app.command()
def health(
    url: str = typer.Option("http://localhost:3000", help="Server URL"),
):
    """Check DeviceHub server health."""
    import httpx

    try:
        resp = httpx.get(f"{url}/health", timeout=5)
        data = resp.json()
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if resp.status_code != 200:
        console.print(
            f"[bold red]{data.get('status', 'unhealthy')}[/bold red]: {data.get('error', '')}"
        )
        raise typer.Exit(1)
    console.print(
        f"[bold green]{data['status']}[/bold green] v{data['version']}, "
        f"up {data['uptime']:.0f}s"
    )


if __name__ == "__main__":
    app()
