# population.py – Lotka–Volterra predator/prey model, forward Euler
#
#   dx/dt = alpha·x − beta·x·y        (prey)
#   dy/dt = delta·x·y − gamma·y       (predator)
#
# Fixed step only. Large dt or rates may oscillate or blow up; populations
# are clipped at zero in every recorded state and NaN inputs flow through.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Iterator, Mapping

import numpy as np

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationParams:
    alpha: float
    beta: float
    gamma: float
    delta: float
    prey_initial: float
    predator_initial: float
    steps: int
    dt: float

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "SimulationParams":
        """Build from form-style values (strings or numbers)."""
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in values:
                raise ValueError(f"missing simulation parameter {f.name!r}")
            raw = values[f.name]
            try:
                num = float(raw)
                kwargs[f.name] = int(num) if f.name == "steps" else num
            except (TypeError, ValueError, OverflowError) as exc:
                raise ValueError(f"{f.name} must be a number, got {raw!r}") from exc
        return cls(**kwargs)


@dataclass(frozen=True)
class SimulationState:
    prey: float
    predator: float


class SimulationHistory:
    """Read-only time series; row i is the state after i steps."""

    def __init__(self, data: np.ndarray) -> None:
        data = np.array(data, dtype=np.float64)
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError("history must have shape (n, 2)")
        data.flags.writeable = False
        self._data = data

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, i: int | slice) -> SimulationState | SimulationHistory:
        # slices stay histories
        if isinstance(i, slice):
            return SimulationHistory(self._data[i])
        prey, predator = self._data[i]
        return SimulationState(float(prey), float(predator))

    def __iter__(self) -> Iterator[SimulationState]:
        for prey, predator in self._data:
            yield SimulationState(float(prey), float(predator))

    def __repr__(self) -> str:
        return f"SimulationHistory(len={len(self)})"

    @property
    def prey(self) -> np.ndarray:
        return self._data[:, 0]

    @property
    def predator(self) -> np.ndarray:
        return self._data[:, 1]

    def as_array(self) -> np.ndarray:
        return self._data

    def peak(self) -> float:
        # chart scale over finite values; never below 1 so flat-zero series still plot
        finite = self._data[np.isfinite(self._data)]
        return max(float(finite.max(initial=0.0)), 1.0)

    def to_records(self) -> list[dict[str, float | None]]:
        """JSON-safe rows; NaN and ±inf become None."""
        return [
            {"step": i, "prey": _finite(s.prey), "predator": _finite(s.predator)}
            for i, s in enumerate(self)
        ]


def _finite(x: float) -> float | None:
    return x if math.isfinite(x) else None


def simulate(params: SimulationParams) -> SimulationHistory:
    p = params
    n = max(0, int(p.steps))
    out = np.empty((n + 1, 2), dtype=np.float64)

    prey = float(p.prey_initial)
    predator = float(p.predator_initial)
    out[0] = (prey, predator)
    for i in range(n):
        prey_growth = p.alpha * prey
        predation = p.beta * prey * predator
        predator_gain = p.delta * prey * predator
        predator_loss = p.gamma * predator

        prey += (prey_growth - predation) * p.dt
        predator += (predator_gain - predator_loss) * p.dt
        # only the recorded state is clipped; max() keeps NaN when it comes first
        out[i + 1] = (max(prey, 0.0), max(predator, 0.0))

    log.debug("simulated %d steps (dt=%s)", n, p.dt)
    return SimulationHistory(out)


__all__ = [
    "SimulationHistory",
    "SimulationParams",
    "SimulationState",
    "simulate",
]
