from gesture_four.components.disc_kind import DiscKind
from gesture_four.components.game_state import GameMode
from gesture_four.components.viewport import Viewport
from gesture_four.events.bus import (
    EVENT_GAME_MODE_CHANGED,
    EVENT_GAME_STARTED,
    EVENT_MATCH_RESET,
    EVENT_WINDOW_RESIZED,
)
from gesture_four.utils.world_queries import (
    active_disc,
    bombs_remaining,
    current_mode,
    current_player_entity,
    match_state,
    player_identity,
    singleton,
)
from tests.helpers import build_game, drive_ticks, is_empty


def test_start_request_enters_playing_with_fresh_board():
    game = build_game(started=False)
    started = []
    modes = []
    game.bus.subscribe(EVENT_GAME_STARTED, lambda sender, **kw: started.append(kw))
    game.bus.subscribe(EVENT_GAME_MODE_CHANGED, lambda sender, **kw: modes.append(kw['new_mode']))
    assert current_mode(game.world) == GameMode.LANDING
    game.start()
    assert current_mode(game.world) == GameMode.PLAYING
    assert started == [{}]
    assert modes == [GameMode.PLAYING]
    assert is_empty(game.board)
    # A second request while playing changes nothing.
    game.start()
    assert len(started) == 1


def test_win_timer_returns_to_landing_with_empty_board():
    game = build_game()
    for _ in range(3):
        game.play(1)
        game.play(2)
    game.play(1)
    assert match_state(game.world).game_over
    old_board = game.board

    # The countdown already started while the last ticks of the move ran.
    remaining = 10.0 - match_state(game.world).win_timer
    drive_ticks(game.bus, 1, dt=remaining - 0.5)
    assert current_mode(game.world) == GameMode.PLAYING
    drive_ticks(game.bus, 1, dt=1.0)

    assert current_mode(game.world) == GameMode.LANDING
    assert game.board is not old_board
    assert is_empty(game.board)
    state = match_state(game.world)
    assert not state.game_over and state.winner is None and state.winning_positions == []
    assert player_identity(game.world, current_player_entity(game.world)).number == 1


def test_reset_restores_bombs_and_normal_disc():
    game = build_game()
    owner = current_player_entity(game.world)
    game.discs.on_toggle(None)
    game.play(3)
    assert bombs_remaining(game.world, owner) == 0
    game.flow.return_to_landing(reason="test")
    assert bombs_remaining(game.world, owner) == 1
    assert active_disc(game.world).kind is DiscKind.NORMAL


def test_resize_resets_match_and_keeps_mode():
    game = build_game()
    resets = []
    game.bus.subscribe(EVENT_MATCH_RESET, lambda sender, **kw: resets.append(kw['reason']))
    game.play(3)
    assert game.board.cells[5][3].occupied
    game.bus.emit(EVENT_WINDOW_RESIZED, width=1920, height=1080)
    assert resets == ['resize']
    assert current_mode(game.world) == GameMode.PLAYING
    assert is_empty(game.board)
    viewport = singleton(game.world, Viewport)
    assert (viewport.width, viewport.height) == (1920, 1080)
    disc = active_disc(game.world)
    assert disc.x == 1440.0
    assert disc.radius == 54.0


def test_resize_to_same_size_is_ignored():
    game = build_game()
    game.play(3)
    game.bus.emit(EVENT_WINDOW_RESIZED, width=1280, height=720)
    assert game.board.cells[5][3].occupied
