import pytest

from wolfcast.weapon import Weapon


def test_initial_frame_rect_is_first_frame():
    assert Weapon().frame_rect() == (0, 0, 160, 128)


def test_trigger_starts_animation_once():
    weapon = Weapon()
    assert weapon.trigger(1.0) is True
    assert weapon.animating is True
    assert weapon.trigger(1.05) is False
    assert weapon.last_frame_time == 1.0


def test_update_waits_for_frame_time():
    weapon = Weapon()
    weapon.trigger(0.0)
    assert weapon.update(0.05) is False
    assert weapon.frame == 0
    assert weapon.update(0.2) is True
    assert weapon.frame == 1
    assert weapon.frame_rect() == (160, 0, 160, 128)


def test_animation_runs_through_frames_and_stops():
    weapon = Weapon()
    weapon.trigger(0.0)
    frames = []
    now = 0.0
    while weapon.animating:
        now += 0.2
        weapon.update(now)
        frames.append(weapon.frame)
    assert frames == [1, 2, 0]
    assert weapon.frame_rect()[0] == 0
    assert weapon.trigger(now) is True


def test_update_without_trigger_does_nothing():
    weapon = Weapon()
    assert weapon.update(10.0) is False
    assert weapon.frame == 0


def test_layout_scales_with_window():
    weapon = Weapon()
    small = weapon.layout(640, 480)
    large = weapon.layout(1280, 960)
    assert large.scale == pytest.approx(2 * small.scale)
    assert large.x == pytest.approx(2 * small.x)
    assert large.y == pytest.approx(2 * small.y)


def test_layout_keeps_gun_inside_window():
    layout = Weapon().layout(640, 480)
    assert 0 < layout.x < 640
    assert 0 < layout.y < 480
    assert layout.scale * 160 == pytest.approx(640 * 0.45)