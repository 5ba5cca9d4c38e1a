import logging

from esper import World

from gesture_four.components.disc_kind import DiscKind
from gesture_four.events.bus import EVENT_DISC_SETTLED, EVENT_GAME_WON, EventBus
from gesture_four.systems.board_ops import get_board
from gesture_four.systems.win_detection import check_win
from gesture_four.utils.world_queries import match_state

logger = logging.getLogger(__name__)


class MatchResolutionSystem:
    """Runs win detection for every normal disc that settles on the board."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_DISC_SETTLED, self.on_disc_settled)

    def on_disc_settled(self, sender, **kwargs):
        if kwargs.get('kind') is not DiscKind.NORMAL:
            return
        state = match_state(self.world)
        if state.game_over:
            return
        row = kwargs['row']; col = kwargs['col']; owner = kwargs['owner']
        positions = check_win(get_board(self.world), row, col, owner)
        if not positions:
            return
        state.game_over = True
        state.winner = owner
        state.winning_positions = list(positions)
        state.win_timer = 0.0
        logger.info("Player %d wins with %s", owner, positions)
        self.event_bus.emit(EVENT_GAME_WON, winner=owner, positions=list(positions))
