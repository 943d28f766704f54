"""
circle_art.py - figures, composition and the per-frame driver

Contains:
- RenderTransform: translate / rotate / scale for one figure on one frame
- CircleArt: immutable figure (seeds + base transform + drawing routine)
- LAYOUT + Composition: the twelve figures, built once and cached
- draw_background_grid: four quadrants with a fixed-seed dot scatter
- draw_frame: clear → background → clock → update/draw every figure
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Tuple

from noise_engine import SEED_RANGE, map_range
from figures import FIGURES


class RenderTransform(NamedTuple):
    x: float
    y: float
    angle: float   # degrees
    scale: float


@dataclass(frozen=True)
class CircleArt:
    x: float
    y: float
    scale: float
    draw_fn: Callable
    nx: float
    ny: float
    ns: float
    nr: float

    @classmethod
    def create(cls, x, y, scale, draw_fn, rng=None):
        """Draw the four noise seeds once; they never change afterwards."""
        rng = rng or random.Random()
        return cls(x, y, scale, draw_fn,
                   nx=rng.uniform(0, SEED_RANGE), ny=rng.uniform(0, SEED_RANGE),
                   ns=rng.uniform(0, SEED_RANGE), nr=rng.uniform(0, SEED_RANGE))

    @property
    def seeds(self):
        return (self.nx, self.ny, self.ns, self.nr)

    def update(self, motion, t) -> RenderTransform:
        cfg, k = motion.config, motion.intensity
        px = motion.sample(self.nx, t)
        py = motion.sample(self.ny, t)
        ps = motion.sample(self.ns, t)
        pr = motion.sample(self.nr, t)

        dx = map_range(px, 0, 1, -cfg.wiggle * k, cfg.wiggle * k)
        dy = map_range(py, 0, 1, -cfg.wiggle * k, cfg.wiggle * k)
        # only the upper breathing bound follows intensity
        breath = map_range(ps, 0, 1, cfg.s_min, cfg.s_max * k)
        angle = map_range(pr, 0, 1, -cfg.rot_max * k, cfg.rot_max * k)
        return RenderTransform(self.x + dx, self.y + dy, angle, self.scale * breath)

    def draw(self, canvas, motion, t, transform: Optional[RenderTransform] = None):
        tr = transform if transform is not None else self.update(motion, t)
        with canvas.local_frame():
            canvas.translate(tr.x, tr.y)
            canvas.rotate(tr.angle)
            canvas.scale(tr.scale)
            self.draw_fn(canvas, motion, t)
        return tr


# (x, y, scale, routine) in draw order; later entries paint over earlier ones
LAYOUT: List[Tuple[float, float, float, str]] = [
    (10, 10, 1.0, "circle6"),
    (220, 180, 0.9, "circle4"),
    (400, -30, 0.4, "circle7"),
    (530, 180, 0.6, "circle8"),
    (785, 80, 0.8, "circle4"),

    (-45, 270, 0.9, "circle3"),
    (154, 460, 1.4, "circle1"),
    (434, 460, 1.4, "circle2"),
    (760, 410, 1.2, "circle3"),

    (20, 700, 1.0, "circle5"),
    (295, 730, 1.1, "circle6"),
    (610, 730, 0.7, "circle7"),
]


class Composition:
    """Lazily instantiates LAYOUT once so figure seeds stay put for the whole run."""
    def __init__(self, layout=None, rng=None, routines=None):
        self.layout = list(layout if layout is not None else LAYOUT)
        self.rng = rng or random.Random()
        self.routines = routines or FIGURES
        self._figures: Optional[Tuple[CircleArt, ...]] = None

    @property
    def figures(self) -> Tuple[CircleArt, ...]:
        if self._figures is None:
            self._figures = tuple(CircleArt.create(x, y, s, self.routines[name], self.rng)
                                  for x, y, s, name in self.layout)
        return self._figures

    def __iter__(self):
        return iter(self.figures)

    def __len__(self):
        return len(self.layout)


# ---------- background ----------
GRID_COLORS = [(209, 74, 42), (76, 149, 224), (85, 143, 72), (222, 123, 46)]  # red, blue, green, orange
GRID_SEED = 9103
GRID_MARGIN = 10
DOT_CONFIG = [
    {"gx": 0, "gy": 0, "count": 25, "r_min": 15, "r_max": 45},
    {"gx": 1, "gy": 0, "count": 25, "r_min": 15, "r_max": 45},
    {"gx": 0, "gy": 1, "count": 15, "r_min": 10, "r_max": 36},
    {"gx": 1, "gy": 1, "count": 15, "r_min": 10, "r_max": 36},
]

def draw_background_grid(canvas):
    cell = canvas.width / 2
    canvas.no_stroke()
    for i, col in enumerate(GRID_COLORS):
        canvas.fill(col)
        canvas.rect((i % 2) * cell, (i // 2) * cell, cell, cell)

    # reseeded every frame so the scatter is identical each time
    rng = random.Random(GRID_SEED)
    canvas.fill(0)
    for q in DOT_CONFIG:
        bx, by = q["gx"] * cell, q["gy"] * cell
        for _ in range(q["count"]):
            r = rng.uniform(q["r_min"], q["r_max"])
            cx = bx + rng.uniform(GRID_MARGIN + r, cell - GRID_MARGIN - r)
            cy = by + rng.uniform(GRID_MARGIN + r, cell - GRID_MARGIN - r)
            canvas.circle(cx, cy, r)


# ---------- frame driver ----------
def draw_frame(canvas, composition, motion):
    """One display refresh. Returns the clock value the figures were drawn at."""
    canvas.reset_matrix()
    canvas.clear()
    draw_background_grid(canvas)
    t = motion.advance()
    for fig in composition:
        fig.draw(canvas, motion, t, fig.update(motion, t))
    return t
