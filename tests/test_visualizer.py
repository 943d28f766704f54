"""Tests for the host glue: config assembly, resize/pointer callbacks, offline export."""
import json

import pytest

import circle_art_visualizer as viz
from noise_engine import NOISE, ConfigError


class TestBuildConfig:
    def test_defaults(self):
        assert viz.build_config(viz.parse_args([])) == NOISE

    def test_flags_override_json(self, tmp_path):
        path = tmp_path / "noise.json"
        path.write_text(json.dumps({"wiggle": 12, "rot_max": 45}))
        cfg = viz.build_config(viz.parse_args(["--config", str(path), "--wiggle", "30", "--no-animate"]))
        assert cfg.wiggle == 30
        assert cfg.rot_max == 45
        assert cfg.animate is False

    def test_scale_flags(self):
        cfg = viz.build_config(viz.parse_args(["--scale-min", "0.5", "--scale-max", "1.5"]))
        assert (cfg.s_min, cfg.s_max) == (0.5, 1.5)

    def test_inverted_scale_range_rejected(self):
        with pytest.raises(ConfigError):
            viz.build_config(viz.parse_args(["--scale-min", "2", "--scale-max", "1"]))

    def test_json_must_be_object(self, tmp_path):
        path = tmp_path / "noise.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            viz.build_config(viz.parse_args(["--config", str(path)]))

    def test_main_reports_bad_config(self, capsys):
        assert viz.main(["--wiggle", "-3"]) == 2
        assert "[ERROR]" in capsys.readouterr().out


class TestCircleArtApp:
    def test_resize_centers_canvas(self):
        app = viz.CircleArtApp(seed=1)
        assert app.on_resize(1200, 1000) == (200, 100)
        assert app.on_resize(600, 900) == (0, 50)

    def test_pointer_is_canvas_relative(self):
        app = viz.CircleArtApp(seed=1)
        app.on_resize(1200, 1000)
        intensity, time_scale = app.on_pointer(600, 500)
        assert intensity == pytest.approx(1.25)
        assert time_scale == pytest.approx(1.15)

    def test_pointer_outside_canvas_clamped(self):
        app = viz.CircleArtApp(seed=1)
        app.on_resize(1200, 1000)
        app.on_pointer(0, 0)
        assert app.state.motion_intensity == 0.5
        assert app.state.time_scale == 0.3

    def test_resize_does_not_touch_composition(self):
        app = viz.CircleArtApp(seed=1)
        figures = app.composition.figures
        app.on_resize(2000, 2000)
        assert app.composition.figures is figures
        assert (app.canvas.width, app.canvas.height) == (800, 800)

    def test_no_animate_freezes_clock_from_first_frame(self):
        config = viz.build_config(viz.parse_args(["--no-animate"]))
        app = viz.CircleArtApp(config, seed=1)
        for _ in range(3):
            assert app.render_frame() == 0.0
        assert app.state.clock == 0.0
        assert app.motion.config is config

    def test_config_fixed_after_startup(self):
        app = viz.CircleArtApp(seed=1)
        app.on_pointer(400, 400)
        app.render_frame()
        assert app.motion.config is NOISE

    def test_seeded_runs_repeat(self):
        a, b = viz.CircleArtApp(seed=9), viz.CircleArtApp(seed=9)
        assert [f.seeds for f in a.composition] == [f.seeds for f in b.composition]
        assert a.render_frame() == b.render_frame()


class TestOffline:
    def test_writes_frames(self, tmp_path, capsys):
        app = viz.CircleArtApp(seed=3)
        viz.run_offline(app, 2, tmp_path, pointer=(800, 800))
        assert sorted(p.name for p in tmp_path.iterdir()) == ["000000.jpg", "000001.jpg"]
        assert app.state.motion_intensity == 2.0
        assert app.state.clock == pytest.approx(0.02 * 2.0 * 2)
        assert "[RENDER] done." in capsys.readouterr().out
