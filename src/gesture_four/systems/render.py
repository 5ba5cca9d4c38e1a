from __future__ import annotations

from esper import World

from gesture_four.components.game_state import GameMode
from gesture_four.constants import IMAGE_DIR
from gesture_four.events.bus import EVENT_TICK, EventBus
from gesture_four.rendering.board_renderer import BoardRenderer
from gesture_four.rendering.disc_renderer import DiscRenderer
from gesture_four.rendering.hud_renderer import HudRenderer
from gesture_four.rendering.snapshot import GameSnapshot, build_snapshot
from gesture_four.rendering.sprite_cache import SpriteCache


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.sprite_cache = SpriteCache(IMAGE_DIR)
        self._time = 0.0
        self._last_cell_layout: dict[tuple[int, int], tuple[float, float]] = {}
        self._last_snapshot: GameSnapshot | None = None
        self._board_renderer = BoardRenderer(self, self.sprite_cache)
        self._disc_renderer = DiscRenderer(self.sprite_cache)
        self._hud_renderer = HudRenderer()

    def on_tick(self, sender, **kwargs):
        self._time += float(kwargs.get('dt', 1/60))

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window only the layout cache is built.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        snap = build_snapshot(self.world)
        self._last_snapshot = snap
        active_keys: set = set()
        if snap.mode == GameMode.LANDING:
            if not headless:
                self._hud_renderer.render(arcade, snap)
                self.sprite_cache.cleanup_bomb_sprites(active_keys)
            return
        self._board_renderer.render(arcade, snap, headless, active_keys)
        if headless:
            return
        self._disc_renderer.render(arcade, snap, active_keys)
        self.sprite_cache.cleanup_bomb_sprites(active_keys)
        self.sprite_cache.draw_bomb_sprites()
        self._hud_renderer.render(arcade, snap)
