"""
RoleScout Command Line Interface

Operator commands for inspecting configuration and preparing the
database used by the role suggestion engine.
"""

import asyncio

import typer
from pymongo.errors import PyMongoError
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="rolescout",
    help="RoleScout role suggestion engine CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main():
    """Configure logging before any command runs."""
    from rolescout.utils.logger import setup_logging

    setup_logging()


@app.command()
def version():
    """Show application version."""
    from rolescout import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show effective configuration."""
    from rolescout.utils.config import get_settings
    from rolescout.utils.constants import APP_DISPLAY_NAME

    settings = get_settings()

    table = Table(title=f"{APP_DISPLAY_NAME} Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("Requirement Threshold", str(settings.matching.requirement_threshold))
    table.add_row("Casting Call Base Score", str(settings.matching.casting_call_base_score))
    table.add_row(
        "Skill Bonus",
        f"{settings.matching.points_per_skill}/skill, max {settings.matching.max_skill_bonus}",
    )
    table.add_row("Query Timeout", str(settings.matching.query_timeout_seconds or "none"))
    table.add_row("Max Results", str(settings.matching.max_results or "all"))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Create the indexes used by the suggestion queries."""
    from rolescout.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")

    db_manager = get_database_manager()

    console.print("  Checking database connection...")
    if not db_manager.check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
        raise typer.Exit(1)

    console.print("  [green]✓[/green] Connected to MongoDB")

    console.print("  Creating indexes...")
    try:
        asyncio.run(db_manager.ensure_indexes())
    except PyMongoError as e:
        console.print(f"[red]Error creating indexes: {e}[/red]")
        raise typer.Exit(1)
    finally:
        db_manager.close_all()
    console.print("  [green]✓[/green] Indexes created")

    console.print("\n[green]Database initialized successfully![/green]")


if __name__ == "__main__":
    app()
