"""
Furniture catalog and factories for rooms and furniture
"""

import logging
import random
from typing import Dict, List
from dataclasses import dataclass

import numpy as np

from .grid import Grid
from .parser import parse

logger = logging.getLogger(__name__)

# Furniture footprints in definition format ("<height>,<width> <rows>...")
FURNITURE_DATA = {
    # 1 cell
    'stool': "1,1 #",
    'plant': "1,1 #",

    # 2 cells
    'chair': "2,1 # #",
    'nightstand': "1,2 ##",

    # tables
    'table': "2,2 ## ##",
    'dining_table': "2,3 ### ###",
    'coffee_table': "1,3 ###",

    # beds
    'single_bed': "4,2 ## ## ## ##",
    'double_bed': "4,3 ### ### ### ###",

    # storage
    'wardrobe': "1,4 ####",
    'bookshelf': "3,1 # # #",

    # corner pieces
    'l_desk': "3,3 ### #.. #..",
    'corner_sofa': "3,3 ### ..# ..#",
    'sofa': "2,3 ### #.#",
}

COLORS = ['oak', 'walnut', 'white', 'grey', 'blue', 'green', 'red', 'black']

COLOR_RGB = {
    'oak': (196, 152, 96),
    'walnut': (110, 72, 44),
    'white': (235, 235, 230),
    'grey': (140, 140, 150),
    'blue': (80, 120, 200),
    'green': (90, 160, 100),
    'red': (190, 70, 70),
    'black': (40, 40, 45),
}


@dataclass
class Furniture:
    id: str
    grid: Grid
    color: str

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def rows(self) -> List[np.ndarray]:
        """Fixed-size occupancy vector per row, each of length width"""
        return self.grid.rows()

    def num_cells(self) -> int:
        return self.grid.occupied_count()


FURNITURE_IDS = list(FURNITURE_DATA.keys())


def create_room(definition: str) -> Grid:
    """Build a room from its textual definition"""
    logger.info("Create room from definition: %s", definition)
    return parse(definition)


def create_furniture(definition: str, furniture_id: str = 'custom', color: str = None) -> Furniture:
    """Build furniture from its textual definition"""
    if color is None:
        color = COLORS[0]
    return Furniture(id=furniture_id, grid=parse(definition), color=color)


def get_furniture_by_id(furniture_id: str, color: str = None) -> Furniture:
    """Return catalog furniture by ID, with a random color unless given"""
    if furniture_id not in FURNITURE_DATA:
        raise ValueError(f"Unknown furniture ID: {furniture_id}. Available: {FURNITURE_IDS}")
    if color is None:
        color = random.choice(COLORS)
    return create_furniture(FURNITURE_DATA[furniture_id], furniture_id, color)


def get_all_furniture_ids() -> List[str]:
    return FURNITURE_IDS.copy()


def get_catalog() -> Dict[str, Grid]:
    """Parsed footprint for every catalog entry"""
    return {fid: parse(definition) for fid, definition in FURNITURE_DATA.items()}
