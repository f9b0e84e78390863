"""
Placement attempt recording.

AttemptRecorder is a placement hook: pass it as `hook=` to layout.overlay.place
and every attempt is kept, then written to JSON with save().
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from .overlay import PlacementEvent

logger = logging.getLogger(__name__)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types"""
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return super().default(obj)


def event_to_dict(t: int, event: PlacementEvent) -> Dict:
    result = event.result
    step = {
        "t": t,
        "room": event.room.to_definition(),
        "furniture": event.furniture.to_definition(),
        "x": event.offset.x,
        "y": event.offset.y,
        "policy": event.policy.value,
        "placed": result.placed,
    }
    if result.placed:
        step["grid"] = result.grid.tolist()
        step["stamped"] = result.grid.occupied_count() - event.room.occupied_count()
    else:
        step["collision"] = list(result.collision)
    return step


class AttemptRecorder:
    """Records placement attempts for later inspection"""

    def __init__(self, base_dir: str = "outputs/attempts"):
        self.base_dir = Path(base_dir)
        self.attempts: List[Dict] = []

    def __call__(self, event: PlacementEvent):
        self.attempts.append(event_to_dict(len(self.attempts), event))

    def clear(self):
        self.attempts = []

    def summary(self) -> Dict:
        placed = sum(1 for a in self.attempts if a["placed"])
        return {
            "total_attempts": len(self.attempts),
            "placed": placed,
            "rejected": len(self.attempts) - placed,
        }

    def save(self, run_name: str) -> Optional[str]:
        """Write attempts to <base_dir>/<run_name>.json and return the path"""
        if not self.attempts:
            return None

        self.base_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.base_dir / f"{run_name}.json"

        data = {"run_name": run_name, **self.summary(), "attempts": self.attempts}
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)

        logger.info("Saved %d placement attempts to %s", len(self.attempts), filepath)
        return str(filepath)


def load_attempts(path: str) -> Dict:
    with open(path, 'r') as f:
        return json.load(f)
