"""
noise_engine.py - Shared motion systems for the CircleArt garden

Contains:
- Utils: lerp / clamp / map_range (p5-style linear remap)
- NoiseConfig (+ ConfigError) and the NOISE defaults
- AnimationState: clock / motion intensity / time scale
- NoiseField: opensimplex-backed smooth noise in [0, 1]
- noise_wiggle: bounded, intensity-scaled offsets
- Pointer mapping and the animation clock
- NoiseMotion: the bundle figures sample through

Nothing in here touches pygame; the canvas and the figures do the drawing.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

import numpy as np
from opensimplex import OpenSimplex

# ---------- ranges ----------
CANVAS_SIZE = 800
INTENSITY_RANGE = (0.5, 2.0)     # horizontal pointer: gentle ~ very wiggly
TIME_SCALE_RANGE = (0.3, 2.0)    # vertical pointer: slow motion ~ fast forward
SEED_RANGE = 1000.0              # per-figure seeds are drawn from [0, SEED_RANGE)

# ---------- utils ----------
def lerp(a, b, t):
    return a + (b - a) * t

def clamp(x, lo, hi):
    return lo if x < lo else hi if x > hi else x

def map_range(v, in_lo, in_hi, out_lo, out_hi):
    """Linear remap of v from [in_lo, in_hi] to [out_lo, out_hi] (no clamping)."""
    return lerp(out_lo, out_hi, (v - in_lo) / (in_hi - in_lo))

# ---------- config ----------
class ConfigError(ValueError):
    """Raised at startup when the noise settings cannot produce sane visuals."""

@dataclass(frozen=True)
class NoiseConfig:
    animate: bool = True
    speed: float = 0.02     # base time step per frame
    wiggle: float = 50.0    # max pixel offset for a whole circle
    s_min: float = 0.9      # min breathing scale
    s_max: float = 1.15     # max breathing scale (before intensity)
    rot_max: float = 300.0  # max rotation (degrees)

    def __post_init__(self):
        if not isinstance(self.animate, bool):
            raise ConfigError(f"animate must be true/false, got {self.animate!r}")
        for name in ("speed", "wiggle", "s_min", "s_max", "rot_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be finite, got {value!r}")
        if self.speed < 0:
            raise ConfigError(f"speed must be >= 0, got {self.speed}")
        if self.wiggle < 0:
            raise ConfigError(f"wiggle must be >= 0, got {self.wiggle}")
        if self.rot_max < 0:
            raise ConfigError(f"rot_max must be >= 0, got {self.rot_max}")
        if self.s_min <= 0:
            raise ConfigError(f"s_min must be > 0, got {self.s_min}")
        if self.s_min > self.s_max:
            raise ConfigError(f"s_min ({self.s_min}) must not exceed s_max ({self.s_max})")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: "NoiseConfig | None" = None) -> "NoiseConfig":
        """Overlay known keys from a JSON-style mapping onto base (or the defaults)."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown noise setting(s): {', '.join(unknown)}")
        return replace(base or cls(), **dict(data))

NOISE = NoiseConfig()

# ---------- global animation state ----------
@dataclass
class AnimationState:
    """The one mutable record shared by the pointer and frame callbacks."""
    clock: float = 0.0
    motion_intensity: float = 1.0
    time_scale: float = 1.0
    carry: float = field(default=0.0, repr=False)   # rounding left over from clock steps

def on_pointer_moved(state, x, y, width=CANVAS_SIZE, height=CANVAS_SIZE):
    """Map canvas-relative pointer coords to intensity (x) and time scale (y)."""
    if width <= 0 or height <= 0:
        raise ValueError(f"surface size must be positive, got {width}x{height}")
    lo, hi = INTENSITY_RANGE
    state.motion_intensity = clamp(map_range(x, 0, width, lo, hi), lo, hi)
    lo, hi = TIME_SCALE_RANGE
    state.time_scale = clamp(map_range(y, 0, height, lo, hi), lo, hi)
    return state.motion_intensity, state.time_scale

def advance_clock(state, config=NOISE):
    """clock += speed * time_scale, summed with fsum so long runs do not drift."""
    if config.animate:
        step = config.speed * state.time_scale
        total = math.fsum((state.clock, state.carry, step))
        state.carry = math.fsum((state.clock, state.carry, step, -total))
        state.clock = total
    return state.clock

# ---------- noise ----------
class NoiseField:
    """Smooth 2D noise sampled as (seed coordinate, time coordinate) -> [0, 1]."""
    def __init__(self, seed=0):
        self.seed = seed
        self._gen = OpenSimplex(seed=seed)

    def sample(self, seed, t):
        raw = self._gen.noise2(float(seed), float(t))
        # opensimplex stays inside [-1, 1] in practice; clip keeps the contract exact
        return float(np.clip((raw + 1.0) * 0.5, 0.0, 1.0))

def noise_wiggle(field, state, seed, amp, t):
    """Symmetric offset in [-amp*I, +amp*I] where I is the current motion intensity."""
    k = amp * state.motion_intensity
    return map_range(field.sample(seed, t), 0.0, 1.0, -k, k)

class NoiseMotion:
    """Noise field + live state + config, handed to every figure and drawing routine."""
    def __init__(self, field=None, state=None, config=NOISE):
        self.field = field if field is not None else NoiseField()
        self.state = state if state is not None else AnimationState()
        self.config = config

    @property
    def intensity(self):
        return self.state.motion_intensity

    def wiggle(self, seed, amp, t):
        return noise_wiggle(self.field, self.state, seed, amp, t)

    def sample(self, seed, t):
        return self.field.sample(seed, t)

    def advance(self):
        return advance_clock(self.state, self.config)

    def pointer(self, x, y, width=CANVAS_SIZE, height=CANVAS_SIZE):
        return on_pointer_moved(self.state, x, y, width, height)
