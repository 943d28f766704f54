"""
canvas.py - p5-flavoured immediate-mode drawing on a pygame Surface

The canvas keeps a stack of 3x3 affine matrices (numpy) plus the current
fill / stroke / stroke weight / rect mode, so figure code can be written in
its own local frame:

    with canvas.local_frame():
        canvas.translate(400, 400)
        canvas.rotate(30)            # degrees
        canvas.circle(0, 0, 200)     # diameter, like p5

Only similarity transforms (translate / rotate / uniform scale) are used, so
circles stay circles and can go straight to pygame.draw.circle; everything
else becomes a polygon.
"""
from __future__ import annotations
import math
from contextlib import contextmanager

import numpy as np
import pygame

from noise_engine import CANVAS_SIZE

CORNER = "corner"
CENTER = "center"

ELLIPSE_SEGMENTS = 48
CURVE_STEPS = 8


def to_rgb(c):
    """Accept 0-255 gray, (r, g, b[, a]) tuples or any pygame colour string."""
    if isinstance(c, (int, float)):
        v = int(max(0, min(255, c)))
        return (v, v, v)
    if isinstance(c, str):
        col = pygame.Color(c)
        return (col.r, col.g, col.b)
    return tuple(int(v) for v in c[:3])


def catmull_rom(points, steps=CURVE_STEPS):
    """Sample a p5 curveVertex run: the first and last points are control points only."""
    pts = np.asarray(points, dtype=float)
    if len(pts) < 4:
        return pts
    out = []
    ts = np.linspace(0.0, 1.0, steps, endpoint=False)
    for i in range(1, len(pts) - 2):
        p0, p1, p2, p3 = pts[i - 1], pts[i], pts[i + 1], pts[i + 2]
        for t in ts:
            t2, t3 = t * t, t * t * t
            out.append(0.5 * ((2 * p1) + (-p0 + p2) * t
                              + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t2
                              + (-p0 + 3 * p1 - 3 * p2 + p3) * t3))
    out.append(pts[-2])
    return np.array(out)


class Canvas:
    def __init__(self, size=(CANVAS_SIZE, CANVAS_SIZE), surface=None):
        self.surface = surface if surface is not None else pygame.Surface(size)
        self.width, self.height = self.surface.get_size()
        self._matrix = np.identity(3)
        self._stack = []
        self._fill = (255, 255, 255)
        self._stroke = (0, 0, 0)
        self._weight = 1.0
        self._rect_mode = CORNER

    # ---------- style ----------
    def fill(self, c):
        self._fill = to_rgb(c)

    def no_fill(self):
        self._fill = None

    def stroke(self, c):
        self._stroke = to_rgb(c)

    def no_stroke(self):
        self._stroke = None

    def stroke_weight(self, w):
        self._weight = float(w)

    def rect_mode(self, mode):
        if mode not in (CORNER, CENTER):
            raise ValueError(f"unknown rect mode {mode!r}")
        self._rect_mode = mode

    # ---------- transform stack ----------
    @property
    def depth(self):
        return len(self._stack)

    @property
    def matrix(self):
        return self._matrix.copy()

    def _snapshot(self):
        return (self._matrix.copy(), self._fill, self._stroke, self._weight, self._rect_mode)

    def _restore(self, snap):
        self._matrix, self._fill, self._stroke, self._weight, self._rect_mode = snap

    def push(self):
        self._stack.append(self._snapshot())

    def pop(self):
        if not self._stack:
            raise IndexError("pop() without matching push()")
        self._restore(self._stack.pop())

    @contextmanager
    def local_frame(self):
        """Scoped push/pop. The entry state is held locally, so on exit the stack
        goes back to its entry depth and the state is restored no matter how
        the body pushed or popped."""
        depth = len(self._stack)
        snap = self._snapshot()
        self.push()
        try:
            yield self
        finally:
            del self._stack[depth:]
            self._restore(snap)

    def reset_matrix(self):
        self._matrix = np.identity(3)
        self._stack.clear()

    def translate(self, x, y):
        self._matrix = self._matrix @ np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]])

    def rotate(self, degrees):
        a = math.radians(degrees)
        c, s = math.cos(a), math.sin(a)
        self._matrix = self._matrix @ np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])

    def scale(self, k):
        self._matrix = self._matrix @ np.array([[k, 0.0, 0.0], [0.0, k, 0.0], [0.0, 0.0, 1.0]])

    def apply(self, points):
        """Local (N, 2) points -> surface pixels."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        return pts @ self._matrix[:2, :2].T + self._matrix[:2, 2]

    def unit(self):
        """Current uniform scale factor (local unit -> pixels)."""
        return math.sqrt(abs(np.linalg.det(self._matrix[:2, :2])))

    # ---------- shapes ----------
    def clear(self, color=(0, 0, 0)):
        self.surface.fill(to_rgb(color))

    def circle(self, x, y, d):
        k = self.unit()
        cx, cy = self.apply((x, y))[0]
        r = abs(d) * 0.5 * k
        if self._fill is not None and r > 0:
            pygame.draw.circle(self.surface, self._fill, (cx, cy), r)
        if self._stroke is not None and self._weight > 0:
            w = self._weight * k
            outer = r + w * 0.5
            if outer >= 1:
                pygame.draw.circle(self.surface, self._stroke, (cx, cy), outer, max(1, int(round(w))))

    def ellipse(self, x, y, w, h):
        if w == h:
            self.circle(x, y, w)
            return
        a = np.linspace(0.0, 2 * math.pi, ELLIPSE_SEGMENTS, endpoint=False)
        pts = np.column_stack((x + 0.5 * w * np.cos(a), y + 0.5 * h * np.sin(a)))
        self._polygon(pts)

    def rect(self, x, y, w, h):
        if self._rect_mode == CENTER:
            x, y = x - w * 0.5, y - h * 0.5
        self._polygon([(x, y), (x + w, y), (x + w, y + h), (x, y + h)])

    def curve_shape(self, points):
        """Closed Catmull-Rom shape through points (beginShape / curveVertex / endShape(CLOSE))."""
        self._polygon(catmull_rom(points))

    def _polygon(self, local_pts):
        pts = self.apply(local_pts)
        if len(pts) < 3:
            return
        poly = [(float(px), float(py)) for px, py in pts]
        if self._fill is not None:
            pygame.draw.polygon(self.surface, self._fill, poly)
        if self._stroke is not None and self._weight > 0:
            pygame.draw.polygon(self.surface, self._stroke, poly, max(1, int(round(self._weight * self.unit()))))
