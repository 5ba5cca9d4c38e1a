from esper import World

from gesture_four.components.active_turn import ActiveTurn
from gesture_four.components.turn_order import TurnOrder
from gesture_four.events.bus import EVENT_DISC_PLACED, EVENT_TURN_ADVANCED, EventBus


class TurnSystem:
    """Hands the turn to the other player as soon as a disc is released.

    The switch does not wait for the drop to settle, so the next player can
    grab while the previous disc is still falling.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_DISC_PLACED, self.on_disc_placed)

    def on_disc_placed(self, sender, **kwargs):
        self.advance()

    def advance(self):
        for _, order in self.world.get_component(TurnOrder):
            if not order.players:
                return
            for _, active in self.world.get_component(ActiveTurn):
                previous = active.owner_entity
                new_owner = order.advance()
                active.owner_entity = new_owner
                self.event_bus.emit(EVENT_TURN_ADVANCED, previous_owner=previous, new_owner=new_owner)
                return
            return
