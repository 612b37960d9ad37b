import pytest

from bravoengine.geometry import Color, Transform, Vector2
from bravoengine.ui import BoundingBox, Button, CameraDebugOverlay, Text, UIObject


def test_button_initialization():
    button = Button()
    assert button.width == 0.0
    assert button.height == 0.0
    assert button.interactable is True
    assert button.hovered is False


def test_button_width_height():
    button = Button()
    button.width = 150.0
    button.height = 75.0
    assert button.width == 150.0
    assert button.height == 75.0


def test_button_interactable():
    button = Button()
    assert button.interactable is True
    button.interactable = False
    assert button.interactable is False


def test_button_hovered():
    button = Button()
    assert button.hovered is False
    button.hovered = True
    assert button.hovered is True


def test_on_click_callback():
    button = Button()
    clicks = []
    button.set_on_click_callback(lambda: clicks.append("click"))
    assert clicks == []
    button.activate_on_click_callback()
    assert clicks == ["click"]


def test_on_release_callback():
    button = Button()
    releases = []
    button.set_on_release_callback(lambda: releases.append("release"))
    assert releases == []
    button.activate_on_release_callback()
    assert releases == ["release"]


def test_inactive_button_does_not_fire_callbacks():
    button = Button()
    calls = []
    button.set_on_click_callback(lambda: calls.append("click"))
    button.set_on_release_callback(lambda: calls.append("release"))
    button.active = False
    button.activate_on_click_callback()
    button.activate_on_release_callback()
    assert calls == []


def test_activate_without_callback_leaves_state_unchanged():
    button = Button()
    button.activate_on_click_callback()
    button.activate_on_release_callback()
    assert button.hovered is False
    assert button.active is True


def test_bounding_box_computation():
    button = Button()
    button.width = 100.0
    button.height = 50.0
    button.transform = Transform(Vector2(10.0, 20.0))
    box = button.bounding_box()
    assert box.top_left.x == 10.0
    assert box.top_left.y == 20.0
    assert box.bottom_right.x == 110.0
    assert box.bottom_right.y == 70.0


def test_bounding_box_contains_point():
    button = Button()
    button.width = 100.0
    button.height = 50.0
    button.transform = Transform(Vector2(10.0, 20.0))
    box = button.bounding_box()
    assert box.contains(Vector2(15.0, 25.0))
    assert not box.contains(Vector2(150.0, 25.0))


@pytest.mark.parametrize(
    "point, expected",
    [
        (Vector2(0, 0), True),
        (Vector2(10, 5), True),
        (Vector2(-0.1, 2), False),
        (Vector2(5, 5.1), False),
    ],
)
def test_bounding_box_edges(point, expected):
    box = BoundingBox(Vector2(0, 0), Vector2(10, 5))
    assert box.contains(point) is expected


def test_bounding_box_does_not_alias_transform():
    button = Button()
    button.transform = Transform(Vector2(3.0, 4.0))
    box = button.bounding_box()
    box.top_left.x = 99.0
    assert button.transform.position == Vector2(3.0, 4.0)


def test_button_is_ui_object():
    button = Button(name="start", tag="menu")
    assert isinstance(button, UIObject)
    assert button.name == "start"
    assert button.tag == "menu"


def test_text_defaults():
    text = Text()
    assert text.text == ""
    assert text.font == ""
    assert text.color == Color(0, 0, 0)
    assert text.scale == Vector2(1, 1)
    assert text.layer == 0
    assert text.transform.position == Vector2(0, 0)


def test_text_constructor_sets_location():
    text = Text("Hello", "Arial", Color(255, 0, 0), Vector2(5, 6), Vector2(2, 3))
    assert text.text == "Hello"
    assert text.font == "Arial"
    assert text.color == Color(255, 0, 0, 255)
    assert text.transform.position == Vector2(5, 6)
    assert text.scale == Vector2(2, 3)


def test_text_setters():
    text = Text()
    text.text = "score"
    text.font = "mono"
    text.color = Color(1, 2, 3, 4)
    text.scale = Vector2(0.5, 0.5)
    text.layer = 7
    assert (text.text, text.font, text.layer) == ("score", "mono", 7)
    assert text.color == Color(1, 2, 3, 4)
    assert text.scale == Vector2(0.5, 0.5)


def test_camera_debug_overlay_defaults():
    overlay = CameraDebugOverlay()
    assert overlay.render_camera_viewport is False
    assert overlay.render_colliders is False
    assert overlay.show_fps is False


def test_camera_debug_overlay_values():
    overlay = CameraDebugOverlay(show_fps=True)
    assert overlay == CameraDebugOverlay(False, False, True)
    assert overlay != CameraDebugOverlay()