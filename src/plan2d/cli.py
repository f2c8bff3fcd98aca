"""Command Line Interface for plan2d.

This module provides a small CLI for inspecting floor plans and
reconstructing their room boundaries.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.errors import PlanError
from .core.topology import dangling_walls
from .engine.api import compute_room_boundaries
from .geom.polygon import boundary_area
from .io.parser import boundaries_to_dict, load_house, parse_id

app = typer.Typer(
    name="plan2d",
    help="A CLI tool for reconstructing room boundaries from floor plan wall graphs",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def boundaries(
    house: Path = typer.Option(..., "--house", "-h", help="Path to house JSON file"),
    room: Optional[str] = typer.Option(
        None, "--room", "-r", help="Only decompose this room (default: all rooms)"
    ),
    include_outward: bool = typer.Option(
        False, "--include-outward", help="Also list outward walks (exterior outlines)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--out", "-o", help="Write the boundaries to this JSON file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Reconstruct the closed room boundaries of a house."""
    _configure_logging(verbose)
    try:
        house_obj = load_house(str(house))
        console.print(f"[green]✓[/green] Loaded house from {house}")

        room_id = parse_id(room) if room is not None else None
        result = compute_room_boundaries(
            house_obj, room_id, include_outward=include_outward
        )

        table = Table()
        table.add_column("#", justify="right")
        table.add_column("Room", style="cyan")
        table.add_column("Orientation", style="green")
        table.add_column("Walls", style="yellow")
        table.add_column("Repeated", style="magenta")
        table.add_column("Area", justify="right")

        for index, boundary in enumerate(result, start=1):
            table.add_row(
                str(index),
                "Unmatched" if boundary.room_id is None else str(boundary.room_id),
                boundary.orientation.value,
                " ".join(str(w) for w in boundary.wall_ids),
                " ".join(str(w) for w in sorted(boundary.repeated_wall_ids, key=str)) or "-",
                f"{boundary_area(house_obj, boundary):.2f}",
            )

        console.print(f"\n[cyan]Boundaries: {len(result)}[/cyan]")
        console.print(table)

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            with open(output, "w", encoding="utf-8") as f:
                json.dump(boundaries_to_dict(result), f, indent=2)
            console.print(f"[green]✓[/green] Boundaries saved to {output}")

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {e}[/red]")
        raise typer.Exit(1)
    except (PlanError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            import traceback

            console.print(traceback.format_exc())
        raise typer.Exit(1)


@app.command()
def info(
    house: Path = typer.Option(..., "--house", "-h", help="Path to house JSON file"),
):
    """Show information about a house."""
    try:
        house_obj = load_house(str(house))

        console.print(f"[bold]House Information: {house_obj.name or house}[/bold]")
        console.print()

        console.print(f"[cyan]Nodes: {len(house_obj.nodes)}[/cyan]")

        # Walls info
        console.print(f"\n[cyan]Walls: {len(house_obj.walls)}[/cyan]")
        wall_table = Table()
        wall_table.add_column("Wall ID", style="cyan")
        wall_table.add_column("Start", justify="center")
        wall_table.add_column("End", justify="center")
        wall_table.add_column("Thickness", justify="right")
        wall_table.add_column("Kind", style="green")

        for wall_id, wall in house_obj.walls.items():
            wall_table.add_row(
                str(wall_id),
                str(wall.start),
                str(wall.end),
                f"{wall.thickness:g}",
                wall.kind or "-",
            )

        console.print(wall_table)

        # Rooms info
        console.print(f"\n[cyan]Rooms: {len(house_obj.rooms)}[/cyan]")
        table = Table()
        table.add_column("Room ID", style="cyan")
        table.add_column("Kind", style="green")
        table.add_column("Walls", justify="center")
        table.add_column("Dangling", style="yellow")

        for room_id, room in house_obj.rooms.items():
            dangling = dangling_walls(house_obj, room.wall_ids)
            table.add_row(
                str(room_id),
                room.kind or "-",
                str(len(room.wall_ids)),
                " ".join(str(w) for w in dangling) or "-",
            )

        console.print(table)

        console.print(f"\n[cyan]Holes: {len(house_obj.holes)}[/cyan]")

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
