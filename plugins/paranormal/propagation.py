"""
Edge Propagation Engine

Spreads the strongest edge in each 3x3 neighborhood outward, one cell per
step, losing 10% of its magnitude per hop. A cell only adopts its
neighbor's value when the decayed magnitude beats its own, so magnitudes
never increase along a path and the loop always reaches a fixed point.

One frame is rendered before every step. The step that changes nothing
ends the run and adds no frame of its own.
"""

from .colormaps import DEFAULT_ANGLE_CLASS, check_angle_class, render_frame

DECAY = 0.9

# Scan order matters for ties: dx outer, dy inner.
NEIGHBORHOOD = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1))


def strongest_neighbor(view):
    """Largest-magnitude cell in the 3x3 neighborhood (self included).

    Equal magnitudes resolve to the last one in NEIGHBORHOOD order.
    """
    best = None
    for dx, dy in NEIGHBORHOOD:
        cell = view[dx, dy]
        if best is None or cell[1] >= best[1]:
            best = cell
    return best


class EdgeFlow:
    """Iterates an (angle, magnitude) grid to its propagation fixed point."""

    def __init__(self, field, angle_class=DEFAULT_ANGLE_CLASS, decay=DECAY):
        """
        Args:
            field: Grid of (angle, magnitude) cells
            angle_class: Hue folding used when rendering frames
            decay: Magnitude multiplier applied per hop
        """
        if not 0.0 <= decay < 1.0:
            raise ValueError(f"decay must be in [0, 1), got {decay!r}")
        self.world = field
        self.angle_class = check_angle_class(angle_class)
        self.decay = decay
        self.generation = 0
        self.last_changed = 0

    def render(self):
        """Current world as a read-only RGB frame."""
        return render_frame(self.world, self.angle_class)

    def step(self):
        """Advance one propagation step. Returns True if any cell changed."""
        changed = 0
        decay = self.decay

        def _spread(v):
            nonlocal changed
            angle, magnitude = strongest_neighbor(v)
            current = v[0, 0]
            decayed = magnitude * decay
            if decayed > current[1]:
                changed += 1
                return (angle, decayed)
            return current

        candidate = self.world.map(_spread)
        self.last_changed = changed
        if not changed:
            return False
        self.world = candidate
        self.generation += 1
        return True

    def frames(self):
        """Yield one frame per step until the world stops changing."""
        while True:
            yield self.render()
            if not self.step():
                return

    def run(self):
        """Run to the fixed point and return every frame in order."""
        return list(self.frames())

    @property
    def stats(self):
        mags = [
            self.world.get(x, y)[1]
            for y in range(self.world.height)
            for x in range(self.world.width)
        ]
        return {
            "generation": self.generation,
            "changed": self.last_changed,
            "max": max(mags),
            "mean": sum(mags) / len(mags),
        }
