"""Database management commands."""

import sys
from pathlib import Path

import typer
from alembic import command
from alembic.config import Config
from rich.console import Console
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

# Add backend to path
backend_dir = Path(__file__).parent.parent.parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from database.seeders.database_seeder import DatabaseSeeder
from database.seeders.demo_task_boards_seeder import DemoTaskBoardsSeeder
from database.seeders.task_statuses_seeder import TaskStatusesSeeder
from taskviews.core.db.session import SessionLocal, engine

app = typer.Typer(help="Database management commands")
console = Console()

SEEDERS = {
    seeder_class.__name__: seeder_class
    for seeder_class in (DatabaseSeeder, TaskStatusesSeeder, DemoTaskBoardsSeeder)
}


@app.command()
def migrate(
    revision: str = typer.Option("head", "--revision", "-r", help="Target revision"),
) -> None:
    """Apply migrations up to a revision."""
    config = Config(str(backend_dir / "alembic.ini"))
    config.set_main_option("script_location", str(backend_dir / "migrations"))

    console.print(f"\n[bold cyan]Upgrading database to {revision}...[/bold cyan]")
    command.upgrade(config, revision)
    console.print("[green]✓ Migrations applied[/green]")


@app.command()
def seed(
    class_name: str = typer.Option(
        "DatabaseSeeder", "--class", "-c", help="Run specific seeder class"
    ),
) -> None:
    """Run database seeders."""
    seeder_class = SEEDERS.get(class_name)
    if seeder_class is None:
        console.print(f"[red]✗ Unknown seeder '{class_name}'[/red]")
        console.print(f"  Available: {', '.join(sorted(SEEDERS))}")
        raise typer.Exit(1)

    db = SessionLocal()
    try:
        seeder = seeder_class()
        if not seeder.is_enabled():
            console.print(f"[yellow]Seeder '{class_name}' skipped: module disabled[/yellow]")
            return

        console.print(f"\n[bold cyan]Running seeder: {class_name}[/bold cyan]")
        seeder.run(db)
        console.print(f"[green]✓ Seeder '{class_name}' executed successfully[/green]")
    except SQLAlchemyError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        db.close()


@app.command()
def check() -> None:
    """Check database connection and status."""
    console.print("\n[bold cyan]Checking database connection...[/bold cyan]")

    try:
        with engine.connect() as connection:
            table_names = inspect(connection).get_table_names()

            console.print("\n[green]✓ Database connection successful[/green]")
            console.print("\n[bold]Database Information:[/bold]")
            console.print(f"  Backend: {engine.url.get_backend_name()}")
            console.print(f"  Name: {engine.url.database}")
            console.print(f"  Tables: {len(table_names)}")

    except SQLAlchemyError as e:
        console.print("\n[red]✗ Database connection failed:[/red]")
        console.print(f"  {e}")
        raise typer.Exit(1)
