#!/usr/bin/env python3
"""
circle_art_visualizer.py - CircleArt noise garden (live window or offline frames)

Live:
  python circle_art_visualizer.py
  mouse x → how wild the wiggle is, mouse y → how fast time runs
  F fullscreen, ESC quit

Offline (headless, JPEG frames via Pillow):
  python circle_art_visualizer.py --frames 600 --out frames_circle_art --pointer 400 400
  CIRCLE_ART_OFFLINE=1 python circle_art_visualizer.py      # same, default frame count

Stitch later with e.g.:
  ffmpeg -framerate 60 -i frames_circle_art/%06d.jpg -c:v libx264 -crf 18 circle_art.mp4
"""
from __future__ import annotations
import argparse, json, os, random, time
from pathlib import Path
from typing import Dict, List, Optional

import pygame
from PIL import Image

from canvas import Canvas
from circle_art import Composition, draw_frame
from noise_engine import CANVAS_SIZE, NOISE, ConfigError, NoiseConfig, NoiseField, NoiseMotion

# ===== Config =====
FPS = 60
OFFLINE_FRAMES = 600
FRAMES_DIR = Path("frames_circle_art")
CAPTION = "CircleArt - Perlin garden"


class CircleArtApp:
    """Host-side glue: owns the canvas, the composition and where the canvas sits in the window."""
    def __init__(self, config: NoiseConfig = NOISE, seed: Optional[int] = None, size=CANVAS_SIZE):
        self.canvas = Canvas((size, size))
        self.motion = NoiseMotion(NoiseField(seed if seed is not None else random.randrange(2**31)), config=config)
        self.composition = Composition(rng=random.Random(seed))
        self.offset = (0, 0)

    @property
    def state(self):
        return self.motion.state

    def on_resize(self, window_w, window_h):
        """Keep the fixed-size canvas centered; nothing inside it is reflowed."""
        x = max(0, (window_w - self.canvas.width) // 2)
        y = max(0, (window_h - self.canvas.height) // 2)
        self.offset = (x, y)
        return self.offset

    def on_pointer(self, window_x, window_y):
        return self.motion.pointer(window_x - self.offset[0], window_y - self.offset[1],
                                   self.canvas.width, self.canvas.height)

    def render_frame(self):
        return draw_frame(self.canvas, self.composition, self.motion)


# ===== Config assembly =====
def build_config(args) -> NoiseConfig:
    cfg = NOISE
    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ConfigError(f"{args.config}: expected a JSON object")
        cfg = NoiseConfig.from_mapping(data, cfg)
    overrides: Dict[str, object] = {}
    for flag, key in (("speed", "speed"), ("wiggle", "wiggle"), ("scale_min", "s_min"),
                      ("scale_max", "s_max"), ("rot_max", "rot_max")):
        value = getattr(args, flag)
        if value is not None:
            overrides[key] = value
    if args.no_animate:
        overrides["animate"] = False
    return NoiseConfig.from_mapping(overrides, cfg) if overrides else cfg


def parse_args(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Perlin-noise CircleArt garden (pointer-driven)")
    ap.add_argument("--config", help="JSON file with noise settings (speed, wiggle, s_min, s_max, rot_max, animate)")
    ap.add_argument("--speed", type=float, help="Base time step per frame (default 0.02)")
    ap.add_argument("--wiggle", type=float, help="Max pixel drift of a whole circle (default 50)")
    ap.add_argument("--scale-min", type=float, help="Min breathing scale (default 0.9)")
    ap.add_argument("--scale-max", type=float, help="Max breathing scale (default 1.15)")
    ap.add_argument("--rot-max", type=float, help="Max rotation in degrees (default 300)")
    ap.add_argument("--no-animate", action="store_true", help="Start with noise time frozen")
    ap.add_argument("--seed", type=int, help="Seed figure noise seeds + noise field for a repeatable run")
    ap.add_argument("--fps", type=int, default=FPS, help="Target frame rate")
    ap.add_argument("--frames", type=int, help="Render this many frames offline instead of opening a window")
    ap.add_argument("--out", type=Path, default=FRAMES_DIR, help="Offline output directory")
    ap.add_argument("--pointer", type=float, nargs=2, metavar=("X", "Y"),
                    help="Fixed pointer position (canvas coords) for offline renders")
    return ap.parse_args(argv)


# ===== Offline =====
def run_offline(app: CircleArtApp, total: int, out_dir: Path, pointer=None):
    out_dir.mkdir(parents=True, exist_ok=True)
    if pointer is not None:
        app.on_pointer(*pointer)
    print(f"[INFO] Offline: frames={total}, size={app.canvas.width}x{app.canvas.height}, "
          f"intensity={app.state.motion_intensity:.2f}, time_scale={app.state.time_scale:.2f}")
    start = last_print = time.time()
    surf = app.canvas.surface
    for idx in range(total):
        app.render_frame()
        raw = pygame.image.tobytes(surf, "RGB")
        Image.frombytes("RGB", surf.get_size(), raw).save(out_dir / f"{idx:06d}.jpg", "JPEG", quality=90)
        now = time.time()
        if now - last_print > 10 or idx + 1 == total:
            print(f"[RENDER] frame {idx+1}/{total} ({100.0*(idx+1)/total:5.1f}%), "
                  f"clock={app.state.clock:.3f}, elapsed {now-start:.1f}s")
            last_print = now
    print(f"[RENDER] done. Frames saved to: {out_dir}/%06d.jpg")


# ===== Live =====
def run_live(app: CircleArtApp, fps: int):
    flags = pygame.RESIZABLE
    screen = pygame.display.set_mode((app.canvas.width, app.canvas.height), flags)
    pygame.display.set_caption(CAPTION)
    app.on_resize(*screen.get_size())
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_f:
                flags ^= pygame.FULLSCREEN
                screen = pygame.display.set_mode((0, 0) if flags & pygame.FULLSCREEN
                                                 else (app.canvas.width, app.canvas.height), flags)
                app.on_resize(*screen.get_size())
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), flags)
                app.on_resize(event.w, event.h)
            elif event.type == pygame.MOUSEMOTION:
                app.on_pointer(*event.pos)

        app.render_frame()
        screen.fill((0, 0, 0))
        screen.blit(app.canvas.surface, app.offset)
        pygame.display.flip()
        clock.tick(fps)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (ConfigError, OSError, json.JSONDecodeError) as e:
        print(f"[ERROR] {e}")
        return 2

    offline = args.frames is not None or os.getenv("CIRCLE_ART_OFFLINE") == "1"
    if offline:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    try:
        app = CircleArtApp(config, seed=args.seed)
        if offline:
            total = args.frames if args.frames is not None else OFFLINE_FRAMES
            run_offline(app, total, args.out, args.pointer)
        else:
            run_live(app, args.fps)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
