import argparse
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from layout.config import PlacementConfig, load_config
from layout.furniture import create_room, create_furniture, get_furniture_by_id
from layout.grid import Offset
from layout.logger import setup_logging
from layout.overlay import BoundaryPolicy, place
from layout.recorder import AttemptRecorder
from render.renderer import RoomRenderer, render_ansi

EXIT_PLACED = 0
EXIT_REJECTED = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Place furniture into a room')
    parser.add_argument('--room', type=str, required=True, help='Room definition, e.g. "2,3 ... .#."')
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--furniture', type=str, help='Furniture definition, e.g. "1,2 ##"')
    group.add_argument('--furniture_id', type=str, help='Catalog furniture ID, e.g. table')
    parser.add_argument('--x', type=int, default=0, help='Column of the furniture top-left cell')
    parser.add_argument('--y', type=int, default=0, help='Row of the furniture top-left cell')
    parser.add_argument('--strict', action='store_true', help='Reject footprints past the room edges')
    parser.add_argument('--config', type=str, default=None, help='Path to JSON config')
    parser.add_argument('--png', type=str, default=None, help='Write a PNG of the attempt')
    parser.add_argument('--record', type=str, default=None, help='Run name to record the attempt under')
    return parser


def run(args) -> int:
    config = load_config(args.config) if args.config else PlacementConfig()
    if args.strict:
        config = replace(config, boundary_policy=BoundaryPolicy.STRICT)

    logger = setup_logging("place_furniture", config.log_level)

    room = create_room(args.room)
    if args.furniture_id:
        furniture = get_furniture_by_id(args.furniture_id)
    else:
        furniture = create_furniture(args.furniture)
    offset = Offset(args.x, args.y)

    recorder = AttemptRecorder(config.record_dir) if config.record_dir else AttemptRecorder()
    result = place(room, offset, furniture.grid, config.boundary_policy,
                   hook=recorder if args.record else None)

    print(render_ansi(room, title="Room:"))
    print(render_ansi(furniture.grid, title=f"Furniture: {furniture.id}"))

    if result.placed:
        print(render_ansi(result.grid, title=f"Placed at ({offset.x}, {offset.y}):"))
    else:
        row, column = result.collision
        print(f"Rejected at ({offset.x}, {offset.y}): collision at row {row}, column {column}")

    if args.png:
        RoomRenderer(cell_size=config.cell_size).save_frame(
            args.png, room, furniture=furniture, offset=offset, result=result)
        logger.info("PNG: %s", args.png)

    if args.record:
        recorder.save(args.record)

    return EXIT_PLACED if result.placed else EXIT_REJECTED


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
