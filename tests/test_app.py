import moderngl_window as mglw

from sceneinput.app import InputDemoApp, demo_surface


class RouterStub:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        return lambda *args: self.calls.append((name, args))


def test_demo_surface_layout():
    surface = demo_surface(960, 540)

    assert [p.name for p in surface.panels] == ["Transport", "Mixer"]
    assert all(len(p.items) == 2 for p in surface.panels)


def test_demo_app_hooks_are_called_by_window_config():
    hooks = [
        "on_render", "on_resize",
        "on_mouse_position_event", "on_mouse_drag_event",
        "on_mouse_press_event", "on_mouse_release_event", "on_key_event",
    ]
    for hook in hooks:
        assert hasattr(mglw.WindowConfig, hook), hook
        assert hook in vars(InputDemoApp), hook


def test_demo_app_forwards_input_to_router():
    app = InputDemoApp.__new__(InputDemoApp)
    app.router = RouterStub()

    app.on_mouse_press_event(10, 20, 1)
    app.on_mouse_drag_event(11, 21, 1, 1)
    app.on_mouse_release_event(11, 21, 1)
    app.on_key_event("A", "press", None)

    assert app.router.calls == [
        ("mouse_press_event", (10, 20, 1)),
        ("mouse_drag_event", (11, 21, 1, 1)),
        ("mouse_release_event", (11, 21, 1)),
        ("key_event", ("A", "press", None)),
    ]
