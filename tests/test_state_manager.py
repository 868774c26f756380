"""
Tests for StateManager: widget setters, wheel zoom, pointer handling and
per-frame snapshots.
"""

import dataclasses

import pytest

from core.state_manager import (
    PRIMARY_BUTTON, SECONDARY_BUTTON, StateManager, zoom_step,
)
from core.types import HoverResult


@pytest.fixture
def manager(config):
    return StateManager(config)


class TestInitialState:

    def test_defaults(self, manager):
        view = manager.snapshot()
        assert view.zoom == 1
        assert view.min_magnitude == 6
        assert view.max_magnitude == -2
        assert view.scale_factor == 0.2
        assert view.rotation_speed == 0.0025
        assert view.color_enabled is False
        assert view.rotation_enabled is False

    def test_no_hover_initially(self, manager):
        assert manager.hovered == HoverResult()
        assert manager.reference_url() is None


class TestSetters:

    def test_min_magnitude_accepts_slider_strings(self, manager):
        manager.set_min_magnitude("4")
        assert manager.snapshot().min_magnitude == 4.0

    def test_scale_factor_is_in_tenths(self, manager):
        manager.set_scale_factor(5)
        assert manager.snapshot().scale_factor == 0.5

    def test_rotation_speed_is_in_thousandths(self, manager):
        manager.set_rotation_speed(3)
        assert manager.snapshot().rotation_speed == 0.003

    def test_toggles(self, manager):
        manager.set_color_enabled(True)
        manager.set_rotation_enabled(True)
        view = manager.snapshot()
        assert view.color_enabled is True
        assert view.rotation_enabled is True

    def test_max_magnitude_is_fixed(self, manager):
        manager.set_min_magnitude(12)
        assert manager.snapshot().max_magnitude == -2


class TestSnapshot:

    def test_snapshot_is_frozen(self, manager):
        view = manager.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            view.zoom = 5

    def test_snapshot_does_not_see_later_changes(self, manager):
        view = manager.snapshot()
        manager.scroll(1)
        manager.set_color_enabled(True)
        assert view.zoom == 1
        assert view.color_enabled is False
        assert manager.snapshot().zoom == 2


class TestZoom:

    @pytest.mark.parametrize("zoom,step", [(1, 1), (4, 1), (5, 2), (10, 2), (25, 4)])
    def test_zoom_step(self, zoom, step):
        assert zoom_step(zoom) == step

    def test_wheel_down_zooms_in(self, manager):
        assert manager.scroll(1) == 2
        assert manager.scroll(1) == 3

    def test_wheel_up_zooms_out(self, manager):
        for _ in range(3):
            manager.scroll(1)
        assert manager.snapshot().zoom == 4
        assert manager.scroll(-1) == 3

    def test_zoom_never_below_one(self, manager):
        assert manager.scroll(-1) == 1
        manager.scroll(1)
        assert manager.scroll(-1) == 1
        assert manager.scroll(-1) == 1

    def test_step_uses_half_up_rounding(self, manager):
        for _ in range(4):
            manager.scroll(1)   # 1 -> 2 -> 3 -> 4 -> 5
        assert manager.snapshot().zoom == 5
        assert manager.scroll(-1) == 3


class TestPointer:

    def test_move_updates_pointer(self, manager):
        manager.pointer_move(12, 34)
        assert manager.snapshot().pointer == (12, 34)

    def test_drag_delta_is_from_press(self, manager):
        manager.pointer_down(100, 100)
        assert manager.pointer_drag(110, 95) == (10, -5)
        assert manager.pointer_drag(130, 120) == (30, 20)

    def test_drag_delta_rounds_half_up(self, manager):
        manager.pointer_down(100, 100)
        assert manager.pointer_drag(110.6, 95.4) == (11, -5)

    def test_new_press_resets_delta(self, manager):
        manager.pointer_down(100, 100)
        manager.pointer_drag(150, 150)
        manager.pointer_down(150, 150)
        assert manager.pointer_drag(151, 150) == (1, 0)

    def test_drag_outside_canvas_is_ignored(self, manager):
        manager.pointer_down(100, 100)
        assert manager.pointer_drag(-1, 50) is None
        assert manager.pointer_drag(50, 601) is None
        assert manager.snapshot().pointer == (50, 601)

    def test_secondary_click_on_named_star_returns_url(self, manager):
        manager.record_hover(HoverResult(32263, "Sirius"))
        url = manager.pointer_down(5, 5, button=SECONDARY_BUTTON)
        assert url == "https://en.wikipedia.org/wiki/Sirius"

    def test_primary_click_returns_nothing(self, manager):
        manager.record_hover(HoverResult(32263, "Sirius"))
        assert manager.pointer_down(5, 5, button=PRIMARY_BUTTON) is None

    def test_secondary_click_on_unnamed_star(self, manager):
        manager.record_hover(HoverResult(77, None))
        assert manager.pointer_down(5, 5, button=SECONDARY_BUTTON) is None


class TestHoverResult:

    def test_display_values(self):
        result = HoverResult(12, "Deneb")
        assert result.display_id == "12"
        assert result.display_name == "Deneb"
        assert result.reference_url("base/") == "base/Deneb"

    def test_empty_result(self):
        result = HoverResult()
        assert result.display_id == "N/A"
        assert result.display_name == "N/A"
        assert result.reference_url("base/") is None
