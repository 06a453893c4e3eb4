"""Config — load heuristic and pond parameters from YAML files.

Every tunable constant of the frog's heuristic (terrain priorities, fly
rewards, two-hop penalties) and of random pond generation lives in YAML
and is parsed into a typed dataclass here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from frogpath.pond.generator import DEFAULT_TERRAIN_WEIGHTS


def _default_fly_priorities() -> dict[int, float]:
    return {1: 2.0, 2: 1.0, 3: 0.0}


@dataclass
class FrogConfig:
    """Top-level configuration for a frog search.

    Lower priorities are more attractive to the frog.

    Attributes:
        seed: RNG seed for random ponds.
        pond_width: Hexagons per row of a random pond.
        pond_height: Rows of a random pond.
        terrain_weights: Relative frequency of each map symbol in random
            ponds.
        water_priority: Priority of a safe water cell.
        reeds_priority: Priority of a safe reeds cell.
        reeds_near_alligator_priority: Priority of reeds next to an
            alligator (reeds are the only terrain still usable there).
        lilypad_priority: Priority of a safe lily pad.
        end_priority: Priority of a safe end cell.
        fly_priorities: Priority of a safe food cell keyed by fly count.
            Fly counts missing here are never hopped to.
        inline_hop_penalty: Added to the priority of a two-hop cell
            reached by jumping twice in the same direction.
        angled_hop_penalty: Added to the priority of a two-hop cell
            reached by changing direction mid-jump.
        queue_capacity: Initial slots in each decision queue.
        queue_growth: Slots added when a decision queue fills up.
    """

    seed: int = 42
    pond_width: int = 12
    pond_height: int = 8
    terrain_weights: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_TERRAIN_WEIGHTS),
    )

    # Terrain priorities
    water_priority: float = 6.0
    reeds_priority: float = 5.0
    reeds_near_alligator_priority: float = 10.0
    lilypad_priority: float = 4.0
    end_priority: float = 3.0
    fly_priorities: dict[int, float] = field(default_factory=_default_fly_priorities)

    # Two-hop jumps from lily pads
    inline_hop_penalty: float = 0.5
    angled_hop_penalty: float = 1.0

    queue_capacity: int = 10
    queue_growth: int = 5

    @classmethod
    def from_yaml(cls, path: str | Path) -> FrogConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated FrogConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        fly_priorities = data.get("fly_priorities")
        terrain_weights = data.get("terrain_weights")
        return cls(
            seed=data.get("seed", cls.seed),
            pond_width=data.get("pond_width", cls.pond_width),
            pond_height=data.get("pond_height", cls.pond_height),
            terrain_weights=(
                {str(k): float(v) for k, v in terrain_weights.items()}
                if terrain_weights is not None
                else dict(DEFAULT_TERRAIN_WEIGHTS)
            ),
            water_priority=data.get("water_priority", cls.water_priority),
            reeds_priority=data.get("reeds_priority", cls.reeds_priority),
            reeds_near_alligator_priority=data.get(
                "reeds_near_alligator_priority",
                cls.reeds_near_alligator_priority,
            ),
            lilypad_priority=data.get("lilypad_priority", cls.lilypad_priority),
            end_priority=data.get("end_priority", cls.end_priority),
            fly_priorities=(
                {int(k): float(v) for k, v in fly_priorities.items()}
                if fly_priorities is not None
                else _default_fly_priorities()
            ),
            inline_hop_penalty=data.get(
                "inline_hop_penalty",
                cls.inline_hop_penalty,
            ),
            angled_hop_penalty=data.get(
                "angled_hop_penalty",
                cls.angled_hop_penalty,
            ),
            queue_capacity=data.get("queue_capacity", cls.queue_capacity),
            queue_growth=data.get("queue_growth", cls.queue_growth),
        )
