"""Main CLI entry point for the task views backend."""

import typer

from scripts.cli.commands import db

app = typer.Typer(
    name="taskviews",
    help="Task views backend CLI",
    add_completion=False,
)

# Register subcommands
app.add_typer(db.app, name="db")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
