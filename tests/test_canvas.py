"""Tests for the transform-stack canvas."""
import numpy as np
import pygame
import pytest

from canvas import CENTER, Canvas, catmull_rom, to_rgb

RED = (255, 0, 0)
BLACK = (0, 0, 0)


def rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


class TestColors:
    def test_gray(self):
        assert to_rgb(0) == (0, 0, 0)
        assert to_rgb(255) == (255, 255, 255)

    def test_tuple(self):
        assert to_rgb((1, 2, 3, 4)) == (1, 2, 3)

    def test_hex_string(self):
        assert to_rgb("#d14a2a") == (209, 74, 42)


class TestTransforms:
    def test_translate(self):
        c = Canvas((100, 100))
        c.translate(10, 20)
        assert np.allclose(c.apply((1, 1)), [[11, 21]])

    def test_rotate_degrees_clockwise_on_screen(self):
        c = Canvas((100, 100))
        c.rotate(90)
        assert np.allclose(c.apply((10, 0)), [[0, 10]], atol=1e-9)

    def test_scale_unit(self):
        c = Canvas((100, 100))
        c.scale(2.5)
        c.rotate(33)
        assert c.unit() == pytest.approx(2.5)

    def test_compose_order_matches_p5(self):
        c = Canvas((100, 100))
        c.translate(50, 50)
        c.rotate(180)
        c.scale(2)
        assert np.allclose(c.apply((5, 0)), [[40, 50]], atol=1e-9)


class TestStack:
    def test_push_pop_restores_matrix_and_style(self):
        c = Canvas((100, 100))
        c.fill(RED)
        c.push()
        c.translate(5, 5)
        c.no_fill()
        c.pop()
        assert np.allclose(c.matrix, np.identity(3))
        assert c._fill == RED

    def test_pop_without_push(self):
        with pytest.raises(IndexError):
            Canvas((10, 10)).pop()

    def test_local_frame_restores_unbalanced_body(self):
        c = Canvas((100, 100))
        c.translate(3, 4)
        before = c.matrix
        with c.local_frame():
            c.push()
            c.push()
            c.translate(50, 50)
        assert c.depth == 0
        assert np.allclose(c.matrix, before)

    def test_local_frame_restores_on_error(self):
        c = Canvas((100, 100))
        with pytest.raises(RuntimeError):
            with c.local_frame():
                c.push()
                c.rotate(45)
                raise RuntimeError("routine blew up")
        assert c.depth == 0
        assert np.allclose(c.matrix, np.identity(3))

    def test_local_frame_survives_extra_pop(self):
        c = Canvas((100, 100))
        c.fill(RED)
        with c.local_frame():
            c.no_fill()
            c.pop()
            c.translate(40, 40)
        assert c.depth == 0
        assert np.allclose(c.matrix, np.identity(3))
        assert c._fill == RED

    def test_nested_local_frames(self):
        c = Canvas((100, 100))
        with c.local_frame():
            c.translate(10, 0)
            with c.local_frame():
                c.translate(10, 0)
                assert c.depth == 2
            assert np.allclose(c.apply((0, 0)), [[10, 0]])
        assert c.depth == 0

    def test_reset_matrix(self):
        c = Canvas((100, 100))
        c.push()
        c.translate(9, 9)
        c.reset_matrix()
        assert c.depth == 0
        assert np.allclose(c.matrix, np.identity(3))


class TestShapes:
    def test_circle_lands_on_transformed_center(self):
        c = Canvas((100, 100))
        c.no_stroke()
        c.fill(RED)
        c.translate(70, 30)
        c.circle(0, 0, 10)
        assert rgb(c.surface, 70, 30) == RED
        assert rgb(c.surface, 30, 70) == BLACK

    def test_circle_diameter_is_scaled(self):
        c = Canvas((100, 100))
        c.no_stroke()
        c.fill(RED)
        c.translate(50, 50)
        c.scale(4)
        c.circle(0, 0, 10)   # 40 px across
        assert rgb(c.surface, 50 + 17, 50) == RED
        assert rgb(c.surface, 50 + 25, 50) == BLACK

    def test_stroke_only_ring(self):
        c = Canvas((100, 100))
        c.no_fill()
        c.stroke(RED)
        c.stroke_weight(4)
        c.circle(50, 50, 60)
        assert rgb(c.surface, 50, 50) == BLACK
        assert rgb(c.surface, 80, 50) == RED

    def test_clear(self):
        c = Canvas((20, 20))
        c.clear((10, 20, 30))
        assert rgb(c.surface, 5, 5) == (10, 20, 30)

    def test_rect_corner_and_center_modes(self):
        c = Canvas((100, 100))
        c.no_stroke()
        c.fill(RED)
        c.rect(0, 0, 20, 20)
        assert rgb(c.surface, 10, 10) == RED
        c.fill((0, 255, 0))
        c.rect_mode(CENTER)
        c.rect(60, 60, 20, 20)
        assert rgb(c.surface, 60, 60) == (0, 255, 0)
        assert rgb(c.surface, 75, 75) == BLACK

    def test_bad_rect_mode(self):
        with pytest.raises(ValueError):
            Canvas((10, 10)).rect_mode("middle")

    def test_rotated_ellipse(self):
        c = Canvas((100, 100))
        c.no_stroke()
        c.fill(RED)
        c.translate(50, 50)
        c.rotate(90)
        c.ellipse(0, 0, 80, 10)   # long axis now vertical
        assert rgb(c.surface, 50, 15) == RED
        assert rgb(c.surface, 85, 50) == BLACK

    def test_curve_shape_fills(self):
        c = Canvas((100, 100))
        c.no_stroke()
        c.fill(RED)
        pts = [(50, 20), (50, 20), (80, 50), (50, 80), (20, 50), (50, 20)]
        c.curve_shape(pts)
        assert rgb(c.surface, 50, 50) == RED


class TestCatmullRom:
    def test_passes_through_inner_points(self):
        pts = [(0, 0), (1, 0), (2, 1), (3, 1), (4, 0)]
        out = catmull_rom(pts, steps=4)
        assert np.allclose(out[0], (1, 0))
        assert np.allclose(out[4], (2, 1))
        assert np.allclose(out[-1], (3, 1))

    def test_too_few_points_passthrough(self):
        out = catmull_rom([(0, 0), (1, 1), (2, 2)])
        assert out.shape == (3, 2)
