"""Shared defaults for connector routing.

The HTTP service, the command line and ``RouterConfig`` all read their
defaults from ``ROUTING_RULES`` so a value changed here is picked up
everywhere.

Distances are in canvas units (the same units the caller uses for its
shape rectangles).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoutingRules:
    """Default routing parameters."""

    shape_margin: float = 10.0
    """Clearance kept around the two endpoint shapes and every obstacle.
    Also the length of each antenna."""

    global_bounds_margin: float = 50.0
    """Extra room around the two shapes when sizing the working area."""

    spot_strategy: str = "lattice"
    """Candidate-spot policy: ``"grid"`` (ruler-cell corners) or
    ``"lattice"`` (uniform sampling between the shapes).

    Lattice lines start at the upper anchor (rows) and lookout past the
    nearer inflated right edge (columns), ``lattice_step`` apart.  An antenna off
    those lines gets no graph neighbours, so the route comes back empty
    where ``"grid"`` would find one (e.g. anchors 155 units apart
    vertically with the default step)."""

    lattice_step: float = 10.0
    """Spacing between lattice samples."""

    lattice_lookout: float = 30.0
    """Inset of the lattice window from the facing shape edges."""

    lattice_extension: int = 20
    """Number of extra lattice steps sampled beyond the window."""

    lattice_min_steps: int = 10
    """Step count used when the window is narrower than this many steps."""

    def to_dict(self) -> dict:
        return {
            "shape_margin": self.shape_margin,
            "global_bounds_margin": self.global_bounds_margin,
            "spot_strategy": self.spot_strategy,
            "lattice_step": self.lattice_step,
            "lattice_lookout": self.lattice_lookout,
            "lattice_extension": self.lattice_extension,
            "lattice_min_steps": self.lattice_min_steps,
        }


# Module-level singleton — importable everywhere.
ROUTING_RULES = RoutingRules()
