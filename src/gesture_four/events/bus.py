from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)
EVENT_WINDOW_RESIZED = "window_resized"            # payload: width=int, height=int


# ============================================================================
# GESTURE INPUT
# ============================================================================
EVENT_GESTURE_FRAME = "gesture_frame"              # payload: frame=GestureFrame|None, now=float, dt=float
EVENT_HAND_GRAB = "hand_grab"                      # payload: x, y
EVENT_HAND_MOVE = "hand_move"                      # payload: x, y, col
EVENT_HAND_RELEASE = "hand_release"                # payload: col (-1 when tracking is lost)
EVENT_BOMB_TOGGLE_REQUEST = "bomb_toggle_request"  # payload: none
EVENT_TRACKING_LOST = "tracking_lost"              # payload: reason=str


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_LANDING_PROGRESS = "landing_progress"        # payload: elapsed=float, fraction=float
EVENT_GAME_START_REQUEST = "game_start_request"    # payload: none
EVENT_MATCH_RESET = "match_reset"                  # payload: reason=str
EVENT_TURN_ADVANCED = "turn_advanced"              # payload: previous_owner=int|None, new_owner=int


# ============================================================================
# DISCS & BOARD
# ============================================================================
EVENT_BOMB_TOGGLED = "bomb_toggled"                # payload: owner_entity=int, kind=DiscKind
EVENT_DISC_SETTLED = "disc_settled"                # payload: row, col, owner=int, kind=DiscKind
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=list[GravityMove]
EVENT_BOMB_SEQUENCE_COMPLETE = "bomb_sequence_complete"  # payload: row, col


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list


# ============================================================================
# AUDIO CUES (names are part of the audio contract)
# ============================================================================
EVENT_DISC_PLACED = "disc-placed"                  # payload: owner_entity=int, row, col, kind=DiscKind
EVENT_DISC_GRABBED = "disc-grabbed"                # payload: owner_entity=int, reason=str
EVENT_GAME_STARTED = "game-started"                # payload: none
EVENT_GAME_WON = "game-won"                        # payload: winner=int, positions=list[(r,c)]
EVENT_BOMB_EXPLODED = "bomb-exploded"              # payload: row, col, owner=int, cleared=list[(r,c)]

AUDIO_EVENTS = (
    EVENT_DISC_PLACED,
    EVENT_DISC_GRABBED,
    EVENT_GAME_STARTED,
    EVENT_GAME_WON,
    EVENT_BOMB_EXPLODED,
)
