"""
Room PIL Renderer
Draws rooms and placement attempts to PNG frames, or to text for the console
"""

from PIL import Image, ImageDraw, ImageFont
from typing import Optional, Set, Tuple
from pathlib import Path
import os

from layout.grid import Grid, Offset
from layout.overlay import PlacementResult
from layout.furniture import Furniture, COLOR_RGB

# Try to load a nice font, fallback to default
def get_font(size: int) -> ImageFont.ImageFont:
    font_paths = [
        "C:/Windows/Fonts/arial.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
    ]
    for path in font_paths:
        if os.path.exists(path):
            try:
                return ImageFont.truetype(path, size)
            except OSError:
                pass
    return ImageFont.load_default()


# Colors
COLORS = {
    'bg': (45, 55, 85),
    'grid_bg': (28, 42, 70),
    'empty_cell': (35, 50, 85),
    'occupied_cell': (60, 60, 80),
    'footprint': (255, 255, 100),
    'text_white': (255, 255, 255),
    'text_green': (100, 255, 100),
    'text_red': (255, 100, 100),
    'collision': (255, 80, 80),
}

HEADER_HEIGHT = 50
PADDING = 20


class RoomRenderer:
    """PIL-based renderer for rooms and placements"""

    def __init__(self, cell_size: int = 40):
        self.cell_size = cell_size
        self.font_medium = get_font(20)
        self.font_small = get_font(14)

    def frame_size(self, room: Grid) -> Tuple[int, int]:
        width = room.width * self.cell_size + 2 * PADDING
        height = room.height * self.cell_size + 2 * PADDING + HEADER_HEIGHT
        return width, height

    def render_frame(self,
                     room: Grid,
                     furniture: Optional[Furniture] = None,
                     offset: Optional[Offset] = None,
                     result: Optional[PlacementResult] = None) -> Image.Image:
        """Render the room, and the placement attempt when given"""
        img = Image.new('RGB', self.frame_size(room), COLORS['bg'])
        draw = ImageDraw.Draw(img)

        self._draw_header(draw, img.width, furniture, offset, result)
        self._draw_grid(draw, room, furniture, offset, result)

        return img

    def _draw_header(self, draw: ImageDraw.ImageDraw, width: int,
                     furniture: Optional[Furniture], offset: Optional[Offset],
                     result: Optional[PlacementResult]):
        if furniture is None or offset is None:
            draw.text((PADDING, HEADER_HEIGHT // 2), "Room", font=self.font_medium,
                      fill=COLORS['text_white'], anchor="lm")
            return

        label = f"{furniture.id} @ ({offset.x}, {offset.y})"
        draw.text((PADDING, HEADER_HEIGHT // 2), label, font=self.font_medium,
                  fill=COLORS['text_white'], anchor="lm")

        if result is not None:
            status, color = ("PLACED", COLORS['text_green']) if result.placed else ("REJECTED", COLORS['text_red'])
            draw.text((width - PADDING, HEADER_HEIGHT // 2), status, font=self.font_small,
                      fill=color, anchor="rm")

    def _footprint(self, room: Grid, furniture: Furniture, offset: Offset) -> Set[Tuple[int, int]]:
        """Room (row, column) cells covered by occupied furniture cells"""
        cells = set()
        for r, c in furniture.grid.occupied_cells():
            row, column = offset.y + r, offset.x + c
            if row < room.height and column < room.width:
                cells.add((row, column))
        return cells

    def _draw_grid(self, draw: ImageDraw.ImageDraw, room: Grid,
                   furniture: Optional[Furniture], offset: Optional[Offset],
                   result: Optional[PlacementResult]):
        grid_x, grid_y = PADDING, PADDING + HEADER_HEIGHT
        draw.rounded_rectangle(
            [grid_x - 5, grid_y - 5,
             grid_x + room.width * self.cell_size + 5, grid_y + room.height * self.cell_size + 5],
            radius=10, fill=COLORS['grid_bg']
        )

        footprint = set()
        if furniture is not None and offset is not None:
            footprint = self._footprint(room, furniture, offset)
        furniture_color = COLOR_RGB.get(furniture.color, COLORS['footprint']) if furniture else COLORS['footprint']
        collision = None if result is None or result.placed else tuple(result.collision)

        for row in range(room.height):
            for column in range(room.width):
                cx = grid_x + column * self.cell_size
                cy = grid_y + row * self.cell_size
                cell_rect = [cx + 2, cy + 2, cx + self.cell_size - 2, cy + self.cell_size - 2]

                if (row, column) == collision:
                    color = COLORS['collision']
                elif room.get(row, column):
                    color = COLORS['occupied_cell']
                elif (row, column) in footprint:
                    color = furniture_color
                else:
                    color = COLORS['empty_cell']

                draw.rounded_rectangle(cell_rect, radius=4, fill=color)

                # Outline the attempted footprint over occupied cells
                if (row, column) in footprint and room.get(row, column):
                    draw.rounded_rectangle(cell_rect, radius=4, outline=COLORS['footprint'], width=2)

    def save_frame(self, path: str, room: Grid, **kwargs):
        """Render and save frame to file"""
        img = self.render_frame(room, **kwargs)
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        img.save(path)


def render_ansi(grid: Grid, title: str = None) -> str:
    """Render grid as ASCII art for console"""
    lines = []
    if title:
        lines.append(title)
    lines.append("+" + "-" * (grid.width * 2 + 1) + "+")

    for row in grid.to_rows():
        lines.append("| " + " ".join("█" if c == '#' else "." for c in row) + " |")

    lines.append("+" + "-" * (grid.width * 2 + 1) + "+")
    return "\n".join(lines)
