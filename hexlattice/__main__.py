"""Command line entry point for querying the hex lattice."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .cell import Cell, to_cell
from .config import load_settings
from .errors import HexLatticeError
from .log import get_logger, setup_logging
from .neighbors import DIRECTIONS
from .traversal import area, distance, line, ring, spiral

logger = get_logger("cli")


def _parse_components(text: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid coordinate {text!r}") from exc


def _resolve(components: tuple[int, ...], *, offset: bool) -> Cell:
    if offset and len(components) == 2:
        return Cell.from_offset(*components)
    return to_cell(components)


def _fmt(cell: Cell) -> str:
    return f"{cell.x},{cell.y},{cell.z}"


def _cell_table(title: str, cells: Sequence[Cell]) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("cube")
    table.add_column("offset")
    for index, cell in enumerate(cells):
        off = cell.offset
        table.add_row(str(index), _fmt(cell), f"{off.col},{off.row}")
    return table


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexlattice", description="Hex lattice queries")
    ap.add_argument(
        "--offset",
        action="store_true",
        help="Read 2-component coordinates as offset col,row instead of axial x,y",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    for name in ("convert", "neighbors"):
        p = sub.add_parser(name)
        p.add_argument("cell", type=_parse_components)

    for name in ("ring", "area", "spiral"):
        p = sub.add_parser(name)
        p.add_argument("cell", type=_parse_components)
        p.add_argument("--radius", type=int, default=1)

    for name in ("distance", "line"):
        p = sub.add_parser(name)
        p.add_argument("cell", type=_parse_components)
        p.add_argument("target", type=_parse_components)
    return ap


def _run(args: argparse.Namespace, console: Console) -> None:
    cell = _resolve(args.cell, offset=args.offset)

    if args.command == "convert":
        table = Table(title=f"Cell {_fmt(cell)}")
        table.add_column("view")
        table.add_column("value")
        table.add_row("cube", _fmt(cell))
        table.add_row("axial", f"{cell.axial.x},{cell.axial.y}")
        table.add_row("offset", f"{cell.offset.col},{cell.offset.row}")
        console.print(table)
    elif args.command == "neighbors":
        table = Table(title=f"Neighbors of {_fmt(cell)}")
        table.add_column("direction")
        table.add_column("cube")
        for direction, neighbor in zip(DIRECTIONS, cell.all_adjacent()):
            table.add_row(direction.name, _fmt(neighbor))
        console.print(table)
    elif args.command in ("ring", "area", "spiral"):
        query = {"ring": ring, "area": area, "spiral": spiral}[args.command]
        cells = query(cell, args.radius)
        console.print(_cell_table(f"{args.command} r={args.radius} around {_fmt(cell)}", cells))
    elif args.command == "distance":
        target = _resolve(args.target, offset=args.offset)
        console.print(distance(cell, target))
    elif args.command == "line":
        target = _resolve(args.target, offset=args.offset)
        console.print(_cell_table(f"line {_fmt(cell)} -> {_fmt(target)}", line(cell, target)))


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run one query and print the result."""

    try:
        settings = load_settings()
    except ValidationError as exc:
        Console(stderr=True).print(f"[red]error:[/red] invalid settings: {escape(str(exc))}")
        return 2
    setup_logging(settings.logging)
    args = build_parser().parse_args(argv)
    logger.debug("running %s", args.command)
    try:
        _run(args, Console())
    except HexLatticeError as exc:
        logger.error("%s", exc)
        Console(stderr=True).print(f"[red]error:[/red] {escape(str(exc))}")
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
