from gesture_four.components.animation_drop import DropAnimation
from gesture_four.components.animation_fall import FallAnimation
from gesture_four.components.disc_kind import DiscKind
from gesture_four.components.explosion import Explosion
from gesture_four.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_DISC_SETTLED,
    EventBus,
)
from gesture_four.factories.animation_factory import AnimationFactory
from gesture_four.systems.animation import AnimationSystem
from gesture_four.systems.board_ops import get_board
from gesture_four.systems.bomb_ops import GravityMove
from gesture_four.world import create_world
from tests.helpers import build_game, drive_ticks, fill


def test_released_disc_settles_into_board():
    game = build_game()
    settled = []
    game.bus.subscribe(EVENT_DISC_SETTLED, lambda sender, **kw: settled.append(kw))
    game.release_into(3)
    drive_ticks(game.bus, 10)
    assert not game.board.cells[5][3].occupied
    drive_ticks(game.bus, 100)
    cell = game.board.cells[5][3]
    assert cell.owner == 1
    assert cell.kind is DiscKind.NORMAL
    assert cell.rotation is not None
    assert list(game.world.get_component(DropAnimation)) == []
    assert settled == [{'row': 5, 'col': 3, 'owner': 1, 'kind': DiscKind.NORMAL}]


def test_each_concurrent_drop_keeps_the_row_reserved_at_release():
    game = build_game()
    settled = []
    game.bus.subscribe(EVENT_DISC_SETTLED, lambda sender, **kw: settled.append((kw['row'], kw['col'], kw['owner'])))
    game.release_into(0)
    game.release_into(0)
    drive_ticks(game.bus, 150)
    # The second disc has the shorter fall and lands first.
    assert settled == [(4, 0, 2), (5, 0, 1)]
    assert game.board.cells[5][0].owner == 1
    assert game.board.cells[4][0].owner == 2


def test_disc_is_discarded_when_its_cell_was_filled_during_flight():
    game = build_game()
    settled = []
    game.bus.subscribe(EVENT_DISC_SETTLED, lambda sender, **kw: settled.append(kw))
    game.release_into(6)
    fill(game.board, [(5, 6, 2)])
    drive_ticks(game.bus, 150)
    assert game.board.cells[5][6].owner == 2
    assert not game.board.cells[4][6].occupied
    assert list(game.world.get_component(DropAnimation)) == []
    assert settled == []


def test_fall_group_completes_and_reports_moves():
    bus = EventBus()
    world = create_world(bus)
    AnimationSystem(world, bus)
    completed = []
    bus.subscribe(EVENT_ANIMATION_COMPLETE, lambda sender, **kw: completed.append(kw))
    moves = [GravityMove(source=(2, 1), target=(5, 1), target_x=460.0, target_y=630.0)]
    bus.emit(EVENT_ANIMATION_START, kind='fall', items=moves)
    falls = [f for _, f in world.get_component(FallAnimation)]
    assert len(falls) == 1
    assert falls[0].end == (460.0, 630.0)
    drive_ticks(bus, 5, dt=0.05)
    assert completed == []
    drive_ticks(bus, 5, dt=0.05)
    assert completed and completed[0]['kind'] == 'fall'
    assert completed[0]['items'] == [{'from': (2, 1), 'to': (5, 1)}]
    assert list(world.get_component(FallAnimation)) == []


def test_explosion_grows_fades_and_disappears():
    bus = EventBus()
    world = create_world(bus)
    AnimationSystem(world, bus)
    ent = AnimationFactory(world).create_explosion(100.0, 100.0, 1)
    drive_ticks(bus, 1, dt=0.2)
    explosion = world.component_for_entity(ent, Explosion)
    assert explosion.radius == 40.0
    assert explosion.alpha == 0.5
    drive_ticks(bus, 3, dt=0.2)
    assert list(world.get_component(Explosion)) == []


def test_settle_does_not_touch_board_of_a_different_world():
    first = build_game()
    second = build_game()
    first.play(2)
    assert first.board.cells[5][2].occupied
    assert not any(cell.occupied for row in get_board(second.world).cells for cell in row)
