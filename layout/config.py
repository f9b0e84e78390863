import json
import logging
from pathlib import Path
from typing import Optional, Union
from dataclasses import dataclass, fields, asdict

from .overlay import BoundaryPolicy


@dataclass
class PlacementConfig:

    boundary_policy: Union[str, BoundaryPolicy] = BoundaryPolicy.TRUNCATE

    cell_size: int = 40

    record_dir: Optional[str] = None

    log_level: str = "INFO"

    def __post_init__(self):
        if not isinstance(self.boundary_policy, BoundaryPolicy):
            try:
                self.boundary_policy = BoundaryPolicy(str(self.boundary_policy).lower())
            except ValueError:
                allowed = [p.value for p in BoundaryPolicy]
                raise ValueError(f"Unknown boundary policy: {self.boundary_policy}. Available: {allowed}") from None
        if not isinstance(self.cell_size, int) or isinstance(self.cell_size, bool) or self.cell_size < 4:
            raise ValueError(f"cell_size must be an integer of at least 4 pixels, got {self.cell_size!r}")
        if not isinstance(self.log_level, str) or not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        self.log_level = self.log_level.upper()

    def to_dict(self) -> dict:
        data = asdict(self)
        data['boundary_policy'] = self.boundary_policy.value
        return data


def load_config(path: Union[str, Path]) -> PlacementConfig:
    """Load PlacementConfig from a JSON file"""
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except OSError as e:
        raise ValueError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must hold a JSON object")

    known = {f.name for f in fields(PlacementConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {sorted(unknown)}")
    return PlacementConfig(**data)
