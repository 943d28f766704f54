"""
figures.py - the eight circle drawing routines

Every routine has the signature fn(canvas, motion, t): it draws around the
origin of a frame the caller has already translated / rotated / scaled, and
may call motion.wiggle(seed, amp, t) for its own sub-element motion. Each
animated feature owns a seed band (feature base + element index) so no two
features read the same noise coordinate.
"""
import math
import random

from canvas import CENTER, CORNER

# ---------- seed bands ----------
C1_DOT_ANGLE, C1_DOT_RADIUS = 100, 200
C2_SPOKE_ANGLE, C2_SPOKE_LENGTH = 300, 400
C3_PETAL_ANGLE, C3_PETAL_LENGTH = 500, 600
C4_DOT_RADIUS = 700
C5_PETAL_ANGLE, C5_DOT_DRIFT = 800, 900
C6_DOT_ANGLE = 1000
C7_PETAL_ANGLE, C7_PETAL_LENGTH = 1100, 1200
C8_DOT_RADIUS = 1300

SPARK_SEED = 1234

def cos_d(a): return math.cos(math.radians(a))
def sin_d(a): return math.sin(math.radians(a))


# ==================== CIRCLE #1: purple dot ring ====================
def draw_circle1(canvas, motion, t):
    R = 100
    black, purple, blue = (0, 0, 0), (179, 106, 210), (88, 170, 246)
    white, pink = (255, 255, 255), (204, 102, 170)

    canvas.no_stroke()
    canvas.fill(black)
    canvas.circle(0, 0, R * 2)

    dot_count = 20
    dot_r = R * 0.10
    ring_r = R - dot_r - R * 0.05
    canvas.fill(purple)
    for i in range(dot_count):
        angle = i * (360 / dot_count) + motion.wiggle(C1_DOT_ANGLE + i, 20, t)
        radius = ring_r + motion.wiggle(C1_DOT_RADIUS + i, R * 0.10, t)
        canvas.circle(cos_d(angle) * radius, sin_d(angle) * radius, dot_r * 2)

    canvas.fill(blue)
    canvas.circle(0, 0, R * 1.40)

    canvas.no_fill()
    canvas.stroke(pink)
    canvas.stroke_weight(R * 0.035)
    canvas.circle(0, 0, R * 1.16)
    canvas.stroke(white)
    canvas.stroke_weight(R * 0.18)
    canvas.circle(0, 0, R * 1.04)
    canvas.stroke(pink)
    canvas.stroke_weight(R * 0.03)
    canvas.circle(0, 0, R * 0.60)


# ==================== CIRCLE #2: orange-green with white spokes ====================
def draw_circle2(canvas, motion, t):
    R = 100
    orange, green = (223, 121, 45), (116, 158, 94)

    canvas.no_stroke()
    canvas.fill(0)
    canvas.circle(0, 0, R * 2)
    for size, color in ((R * 0.82, orange), (R * 0.56, green), (R * 0.40, orange), (R * 0.28, green)):
        canvas.fill(color)
        canvas.circle(0, 0, size * 2)

    spoke_count = 24
    inner, outer = R * 0.40, R * 0.82
    canvas.fill(255)
    canvas.rect_mode(CENTER)
    for i in range(spoke_count):
        angle = i * (360 / spoke_count) + motion.wiggle(C2_SPOKE_ANGLE + i, 25, t)
        length = (outer - inner) + motion.wiggle(C2_SPOKE_LENGTH + i, 20, t)
        with canvas.local_frame():
            canvas.rotate(angle)
            canvas.rect((outer + inner) / 2, 0, length, R * 0.06)
    canvas.rect_mode(CORNER)


# ==================== CIRCLE #3: flower ====================
def draw_circle3(canvas, motion, t):
    canvas.no_stroke()
    canvas.fill(0)
    canvas.circle(0, 0, 300)
    canvas.fill(255)
    canvas.circle(0, 0, 120)

    canvas.no_fill()
    canvas.stroke((95, 120, 70))
    canvas.stroke_weight(20)
    canvas.circle(0, 0, 200)

    canvas.no_stroke()
    canvas.fill((230, 150, 40))
    for i in range(8):
        angle = i * 45 + motion.wiggle(C3_PETAL_ANGLE + i, 20, t)
        length = 120 + motion.wiggle(C3_PETAL_LENGTH + i, 30, t)
        with canvas.local_frame():
            canvas.rotate(angle)
            canvas.ellipse(0, -90, 50, length)

    canvas.fill((95, 120, 70))
    canvas.circle(0, 0, 100)


# ==================== CIRCLE #4: blue-red layers ====================
def draw_circle4(canvas, motion, t):
    blue, red = (66, 100, 210), (220, 60, 50)
    outer_black, blue_d = 320, 260

    canvas.no_stroke()
    for d, color in ((outer_black, 0), (blue_d, blue), (200, red), (130, blue), (70, red)):
        canvas.fill(color)
        canvas.circle(0, 0, d)

    canvas.fill((230, 175, 55))
    ring = (blue_d / 2 + outer_black / 2) / 2
    for i in range(12):
        angle = i * 30
        radius = ring + motion.wiggle(C4_DOT_RADIUS + i, 23, t)
        canvas.circle(cos_d(angle) * radius, sin_d(angle) * radius, 26)


# ==================== CIRCLE #5: red petals ====================
PETAL = (
    (0, -0.05), (0, -0.05), (-0.001, -0.08), (-0.025, -0.135), (-0.045, -0.245),
    (-0.055, -0.32), (-0.035, -0.39), (0.035, -0.39), (0.055, -0.32),
    (0.045, -0.245), (0.025, -0.135), (0.001, -0.08),
)

def draw_circle5(canvas, motion, t):
    s = 240
    canvas.fill(255)
    canvas.stroke_weight(round(s * 0.125))
    canvas.stroke(0)
    canvas.circle(0, 0, s)

    canvas.no_stroke()
    canvas.fill((229, 48, 25))
    canvas.circle(0, 0, round(s * 0.125))

    petal = [(px * s, py * s) for px, py in PETAL]
    # rotations accumulate: each petal turns on from the previous one
    with canvas.local_frame():
        for i in range(6):
            canvas.rotate(i * 60 + motion.wiggle(C5_PETAL_ANGLE + i, 35, t))
            canvas.fill((241, 128, 27))
            canvas.curve_shape(petal)
            canvas.fill((81, 122, 225))
            drift = motion.wiggle(C5_DOT_DRIFT + i, 20, t)
            canvas.circle(-0.17 * s, -0.28 * s + drift, s / 9.0)


# ==================== CIRCLE #6: orange layers with sparks ====================
def draw_circle6(canvas, motion, t):
    s = 260
    canvas.no_stroke()
    canvas.fill(0)
    canvas.circle(0, 0, s)
    canvas.fill(255)
    canvas.circle(0, 0, s * (11 / 15))
    canvas.fill((50, 128, 238))
    canvas.circle(0, 0, s * (2 / 3))

    canvas.fill((237, 155, 44))
    for i in range(20):
        angle = i * 18 - 90 + motion.wiggle(C6_DOT_ANGLE + i, 9, t)
        canvas.circle(cos_d(angle) * s * 0.43, sin_d(angle) * s * 0.43, s / 12)

    canvas.fill((231, 105, 31))
    canvas.circle(0, 0, s * 0.5)

    # same seed every frame: the sparks hold still while the ring moves
    rng = random.Random(SPARK_SEED)
    canvas.fill((229, 75, 28))
    for i in range(6):
        angle = -90 + (0.8 * 360) / 5 * i + rng.uniform(-36, 36)
        radius = s * 0.1 + rng.uniform(-0.05 * s, 0.05 * s)
        canvas.circle(cos_d(angle) * radius, sin_d(angle) * radius, rng.uniform(0.05, 0.1) * s)

    canvas.fill((229, 48, 25))
    for i in range(6):
        angle = -90 + (0.7 * 360) / 5 * i + rng.uniform(-36, 36)
        radius = s * 0.13 if i % 2 == 0 else s * 0.08
        canvas.circle(cos_d(angle) * radius, sin_d(angle) * radius, rng.uniform(0.1, 0.12) * s)


# ==================== CIRCLE #7: blue-purple petals ====================
def draw_circle7(canvas, motion, t):
    blue = (1, 164, 249)
    canvas.no_stroke()
    for d, color in ((500, 0), (400, blue), (250, 255), (120, blue)):
        canvas.fill(color)
        canvas.circle(0, 0, d)

    canvas.fill((175, 85, 174))
    for i in range(24):
        angle = 15 * i + motion.wiggle(C7_PETAL_ANGLE + i, 14, t)
        length = 140 + motion.wiggle(C7_PETAL_LENGTH + i, 25, t)
        with canvas.local_frame():
            canvas.rotate(angle)
            canvas.ellipse(0, -130, 18, length)


# ==================== CIRCLE #8: green dots ====================
def draw_circle8(canvas, motion, t):
    canvas.no_stroke()
    canvas.fill(0)
    canvas.circle(0, 0, 500)

    canvas.fill((107, 142, 35))
    for i in range(16):
        radius = 210 + motion.wiggle(C8_DOT_RADIUS + i, 25, t)
        with canvas.local_frame():
            canvas.rotate(22.5 * i)
            canvas.circle(0, -radius, 50)

    for d, color in ((340, 255), (280, 0), (80, (216, 67, 21))):
        canvas.fill(color)
        canvas.circle(0, 0, d)


FIGURES = {
    "circle1": draw_circle1,
    "circle2": draw_circle2,
    "circle3": draw_circle3,
    "circle4": draw_circle4,
    "circle5": draw_circle5,
    "circle6": draw_circle6,
    "circle7": draw_circle7,
    "circle8": draw_circle8,
}
