"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..chat import ManualScheduler
from .providers import get_session, get_settings
from .render import print_message

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="floatchat",
    help="Conversational explorer for canned ARGO ocean data",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

# Polling interval while waiting for a simulated reply
REPLY_POLL_INTERVAL = 0.05


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for the currents velocity draw"
    )
):
    """Ask a single question and print the reply without delay."""
    settings = get_settings(console, seed=seed)
    scheduler = ManualScheduler()
    session = get_session(settings, scheduler=scheduler, console=console)

    if not session.submit(question):
        console.print("[yellow]Nothing to ask: the question is empty[/yellow]")
        raise typer.Exit(code=1)

    scheduler.run_all()

    for message in session.messages[1:]:
        print_message(console, message)


@app.command()
def chat(
    delay: float | None = typer.Option(
        None,
        "--delay",
        "-d",
        min=0,
        help="Simulated reply latency in seconds"
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for the currents velocity draw"
    )
):
    """Interactive console chat."""
    settings = get_settings(console, response_delay=delay, seed=seed)

    async def _chat():
        session = get_session(settings, console=console)

        console.print("[bold cyan]FloatChat Interactive Chat[/bold cyan]")
        console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")
        print_message(console, session.messages[0])

        while True:
            try:
                user_input = console.input("[bold yellow]You:[/bold yellow] ")
            except (KeyboardInterrupt, EOFError):
                console.print("\n[dim]Goodbye![/dim]")
                break

            if user_input.strip().lower() in ('exit', 'quit', 'q'):
                console.print("[dim]Goodbye![/dim]")
                break

            if not session.submit(user_input):
                continue

            with console.status("FloatChat AI is thinking..."):
                while session.pending:
                    await asyncio.sleep(REPLY_POLL_INTERVAL)

            print_message(console, session.messages[-1])

    asyncio.run(_chat())


@app.command(name="tui")
def tui_command(
    delay: float | None = typer.Option(
        None,
        "--delay",
        "-d",
        min=0,
        help="Simulated reply latency in seconds"
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for the currents velocity draw"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel at level: debug, info, warning, error"
    )
):
    """Launch the Textual terminal UI."""
    settings = get_settings(console, response_delay=delay, seed=seed, log_level=log_level)

    from ..ui import run_textual_tui

    asyncio.run(run_textual_tui(
        response_delay=settings.response_delay,
        seed=settings.seed,
        log_level=settings.log_level,
    ))


@app.command()
def serve(
    host: str | None = typer.Option(
        None,
        "--host",
        help="Bind host (default: FLOATCHAT_HOST or 127.0.0.1)"
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        "-p",
        min=1,
        max=65535,
        help="Bind port (default: PORT or 3000)"
    ),
    client_url: str | None = typer.Option(
        None,
        "--client-url",
        help="Allowed cross-origin caller (default: CLIENT_URL)"
    )
):
    """Run the HTTP API shell."""
    settings = get_settings(console, host=host, port=port, client_url=client_url)

    from ..api import run_server

    run_server(settings, console=console)


@app.command()
def health():
    """Show the effective configuration."""
    settings = get_settings(console)

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="bold cyan", width=16)
    table.add_column("Value")

    table.add_row("API address", f"{settings.host}:{settings.port}")
    table.add_row("Allowed origins", ", ".join(settings.allowed_origins))
    table.add_row("Reply delay", f"{settings.response_delay:.2f}s")
    table.add_row("Seed", str(settings.seed) if settings.seed is not None else "random")
    table.add_row("Log level", settings.log_level or "off")

    console.print(table)

    if settings.client_url:
        console.print("[green]+[/green] CLIENT_URL: SET")
    else:
        console.print("[yellow]![/yellow] CLIENT_URL: NOT SET (only local dev origin allowed)")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
