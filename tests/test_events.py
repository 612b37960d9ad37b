from bravoengine.events import Event, EventManager, EventType
from bravoengine.inputs import Key, Mouse, Point


def test_subscribe_to_event():
    manager = EventManager()
    captured = []
    manager.subscribe(lambda event: captured.append(event.type), EventType.KEY_DOWN)
    manager.dispatch(Event(EventType.KEY_DOWN))
    assert captured == [EventType.KEY_DOWN]


def test_handle_events_quit():
    manager = EventManager()
    captured = []
    manager.subscribe(lambda event: captured.append(event.type), EventType.QUIT)
    manager.handle_events([Event(EventType.QUIT)])
    assert captured == [EventType.QUIT]


def test_dispatch_calls_correct_callbacks():
    manager = EventManager()
    key_up = []
    mouse_down = []
    manager.subscribe(lambda event: key_up.append(event.type), EventType.KEY_UP)
    manager.subscribe(lambda event: mouse_down.append(event.type), EventType.MOUSE_BUTTON_DOWN)

    manager.dispatch(Event(EventType.KEY_UP))
    assert key_up == [EventType.KEY_UP]
    assert mouse_down == []

    manager.dispatch(Event(EventType.MOUSE_BUTTON_DOWN))
    assert mouse_down == [EventType.MOUSE_BUTTON_DOWN]


def test_callbacks_run_in_subscription_order_and_receive_payload():
    manager = EventManager()
    calls = []
    manager.subscribe(lambda event: calls.append(("first", event.key)), EventType.KEY_DOWN)
    manager.subscribe(lambda event: calls.append(("second", event.mouse.position.x)), EventType.KEY_DOWN)
    manager.dispatch(Event(EventType.KEY_DOWN, Mouse(position=Point(100, 150)), Key.A))
    assert calls == [("first", Key.A), ("second", 100)]


def test_event_defaults():
    event = Event()
    assert event.type == EventType.UNDEFINED
    assert event.key == Key.UNKNOWN
    assert event.mouse == Mouse()