from types import SimpleNamespace

import pytest

from sceneinput.hosts import HitIndex, PointerRouter, modifier_flags
from sceneinput.input.dispatcher import InputDispatcher
from sceneinput.input.events import EventType, MOD_SHIFT, MOD_ALT
from sceneinput.scene import Surface, Panel, PassiveItem, InteractiveItem, DragPhase


@pytest.fixture
def scene():
    surface = Surface(width=800, height=600)
    actions = []
    panel = Panel(name="panel", x=100, y=100, width=200, height=150,
                  on_item_action=actions.append)
    label = PassiveItem(name="label", x=10, y=10, width=100, height=20)
    button = InteractiveItem(name="button", x=10, y=100, width=80, height=30)
    panel.add_item(label)
    panel.add_item(button)
    surface.add_panel(panel)
    return SimpleNamespace(surface=surface, panel=panel, label=label, button=button,
                           actions=actions)


def log_events(node, store):
    for event_type in EventType:
        node.on(event_type, lambda e, n=node: store.append((n.name, e.type)))


# =============================================================================
# HitIndex
# =============================================================================

def test_hit_index_prefers_items_then_panels_then_surface(scene):
    index = HitIndex(scene.surface)

    assert index.source_at(115, 115) is scene.label.handle
    assert index.source_at(250, 200) is scene.panel.handle
    assert index.source_at(5, 5) is scene.surface.handle
    assert len(index) == 3


def test_hit_index_top_most_panel_wins(scene):
    top = Panel(name="top", x=150, y=150, width=100, height=100)
    scene.surface.add_panel(top)
    index = HitIndex(scene.surface)

    assert index.source_at(160, 160) is top.handle
    assert index.source_at(120, 120) is scene.label.handle


def test_hit_index_empty_surface():
    surface = Surface(width=100, height=100)
    index = HitIndex(surface)

    assert index.source_at(10, 10) is surface.handle


def test_hit_index_origins(scene):
    index = HitIndex(scene.surface)

    assert index.node_origin(scene.panel.handle).to_tuple() == (100, 100)
    assert index.node_origin(scene.button.handle).to_tuple() == (110, 200)
    assert index.node_origin(scene.surface.handle).to_tuple() == (0, 0)


def test_hit_index_rebuild_tracks_moves(scene):
    index = HitIndex(scene.surface)
    scene.panel.position.x = 400

    assert index.source_at(415, 115) is scene.surface.handle
    index.rebuild()
    assert index.source_at(415, 115) is scene.label.handle


# =============================================================================
# PointerRouter
# =============================================================================

def test_router_hover_emits_enter_and_exit(scene):
    router = PointerRouter(InputDispatcher(scene.surface))
    seen = []
    log_events(scene.surface, seen)
    log_events(scene.panel, seen)

    router.mouse_position_event(5, 5)
    router.mouse_position_event(115, 115)

    assert seen == [
        ("surface", EventType.POINTER_ENTER),
        ("surface", EventType.POINTER_MOVE),
        ("surface", EventType.POINTER_EXIT),
        ("panel", EventType.POINTER_ENTER),
        ("panel", EventType.POINTER_MOVE),
    ]
    assert router.hovered is scene.label.handle


def test_router_drag_label_moves_panel(scene):
    router = PointerRouter(InputDispatcher(scene.surface))

    router.mouse_press_event(115, 115, 1)
    assert router.captured is scene.label.handle
    assert scene.panel.drag_state.anchor.to_tuple() == (15, 15)

    router.mouse_drag_event(215, 165)
    router.mouse_release_event(215, 165, 1)

    assert scene.panel.position.to_tuple() == (200, 150)
    assert scene.panel.drag_state.phase == DragPhase.IDLE
    assert router.captured is None
    assert scene.actions == []


def test_router_button_click_fires_action(scene):
    router = PointerRouter(InputDispatcher(scene.surface))
    fired = []
    scene.button.on(EventType.POINTER_RELEASE, lambda e: fired.append("release"))
    scene.button.on(EventType.ACTION, lambda e: fired.append(e.command))

    router.mouse_press_event(115, 205, 1)
    router.mouse_release_event(115, 205, 1)

    assert fired == ["release", "button"]
    assert scene.actions == [scene.button]


def test_router_release_elsewhere_skips_action(scene):
    router = PointerRouter(InputDispatcher(scene.surface))
    fired = []
    scene.button.on(EventType.POINTER_RELEASE, lambda e: fired.append("release"))

    router.mouse_press_event(115, 205, 1)
    router.mouse_release_event(500, 500, 1)

    assert fired == ["release"]
    assert scene.actions == []
    assert router.hovered is scene.surface.handle


def test_router_local_coordinates(scene):
    router = PointerRouter(InputDispatcher(scene.surface))
    got = []
    scene.button.on(EventType.POINTER_PRESS, lambda e: got.append((e.x, e.y, e.screen_x, e.screen_y)))
    scene.surface.position.x = 30

    router.mouse_press_event(115, 205, 1)

    assert got == [(5, 5, 145, 205)]


def test_router_key_event_broadcasts_on_press_only(scene):
    router = PointerRouter(InputDispatcher(scene.surface), press_action="press")
    keys = []
    scene.panel.on(EventType.KEY_PRESS, lambda e: keys.append((e.key, e.modifiers)))

    router.key_event("A", "press", SimpleNamespace(shift=True, ctrl=False, alt=False))
    router.key_event("A", "release", None)

    assert keys == [("A", MOD_SHIFT)]


def test_modifier_flags():
    assert modifier_flags(None) == 0
    assert modifier_flags(3) == 3
    assert modifier_flags(SimpleNamespace(shift=True, ctrl=False, alt=True)) == MOD_SHIFT | MOD_ALT


def test_router_without_press_action_forwards_every_key(scene):
    router = PointerRouter(InputDispatcher(scene.surface))
    keys = []
    scene.panel.on(EventType.KEY_PRESS, lambda e: keys.append(e.key))

    router.key_event("A", 1, None)
    router.key_event("B", 0, None)

    assert keys == ["A", "B"]
