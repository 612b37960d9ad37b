"""Input data types: mouse buttons, mouse state and key codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


@dataclass
class Point:
    """An integer screen position."""

    x: int = 0
    y: int = 0


@dataclass
class Mouse:
    """Mouse position and the state of its three buttons."""

    position: Point = field(default_factory=Point)
    left: bool = False
    middle: bool = False
    right: bool = False


class Key(IntEnum):
    """Keyboard scancodes (USB usage page 0x07) plus mouse and controller buttons."""

    UNKNOWN = 0

    A = 4
    B = 5
    C = 6
    D = 7
    E = 8
    F = 9
    G = 10
    H = 11
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    M = 16
    N = 17
    O = 18  # noqa: E741
    P = 19
    Q = 20
    R = 21
    S = 22
    T = 23
    U = 24
    V = 25
    W = 26
    X = 27
    Y = 28
    Z = 29

    DIGIT_1 = 30
    DIGIT_2 = 31
    DIGIT_3 = 32
    DIGIT_4 = 33
    DIGIT_5 = 34
    DIGIT_6 = 35
    DIGIT_7 = 36
    DIGIT_8 = 37
    DIGIT_9 = 38
    DIGIT_0 = 39

    ENTER = 40
    ESCAPE = 41
    BACKSPACE = 42
    TAB = 43
    SPACE = 44

    MINUS = 45
    EQUALS = 46
    LEFT_BRACKET = 47
    RIGHT_BRACKET = 48
    BACKSLASH = 49
    NON_US_HASH = 50
    SEMICOLON = 51
    APOSTROPHE = 52
    GRAVE = 53
    COMMA = 54
    PERIOD = 55
    SLASH = 56

    CAPS_LOCK = 57

    F1 = 58
    F2 = 59
    F3 = 60
    F4 = 61
    F5 = 62
    F6 = 63
    F7 = 64
    F8 = 65
    F9 = 66
    F10 = 67
    F11 = 68
    F12 = 69

    PRINT_SCREEN = 70
    SCROLL_LOCK = 71
    PAUSE = 72
    INSERT = 73
    HOME = 74
    PAGE_UP = 75
    DELETE = 76
    END = 77
    PAGE_DOWN = 78
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82

    NUM_LOCK_CLEAR = 83
    NUM_DIVIDE = 84
    NUM_MULTIPLY = 85
    NUM_MINUS = 86
    NUM_PLUS = 87
    NUM_ENTER = 88
    NUM_1 = 89
    NUM_2 = 90
    NUM_3 = 91
    NUM_4 = 92
    NUM_5 = 93
    NUM_6 = 94
    NUM_7 = 95
    NUM_8 = 96
    NUM_9 = 97
    NUM_0 = 98
    KP_PERIOD = 99

    L_CONTROL = 224
    L_SHIFT = 225
    L_ALT = 226
    L_GUI = 227
    R_CONTROL = 228
    R_SHIFT = 229
    R_ALT = 230
    R_GUI = 231

    MOUSE_LEFT_BUTTON = 232
    MOUSE_RIGHT_BUTTON = 233
    MOUSE_MIDDLE_BUTTON = 234

    CONTROLLER_CROSS = 300
    CONTROLLER_CIRCLE = 301
    CONTROLLER_TRIANGLE = 302
    CONTROLLER_SQUARE = 303
    CONTROLLER_L1 = 304
    CONTROLLER_L2 = 305
    CONTROLLER_R1 = 306
    CONTROLLER_R2 = 307
    CONTROLLER_OPTIONS = 308
    CONTROLLER_SHARE = 309
    CONTROLLER_L3 = 310
    CONTROLLER_R3 = 311
    CONTROLLER_DPAD_UP = 312
    CONTROLLER_DPAD_DOWN = 313
    CONTROLLER_DPAD_LEFT = 314
    CONTROLLER_DPAD_RIGHT = 315

    CONTROLLER_LEFT_STICK_UP = 316
    CONTROLLER_LEFT_STICK_LEFT = 317
    CONTROLLER_LEFT_STICK_DOWN = 318
    CONTROLLER_LEFT_STICK_RIGHT = 319

    CONTROLLER_RIGHT_STICK_UP = 320
    CONTROLLER_RIGHT_STICK_LEFT = 321
    CONTROLLER_RIGHT_STICK_DOWN = 322
    CONTROLLER_RIGHT_STICK_RIGHT = 323

    # Not a key: the number of scancodes, used as a size bound.
    NUMBER_OF_KEYS = 512