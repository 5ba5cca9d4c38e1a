"""Read-only view of one frame of game state for renderers and tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from esper import World

from gesture_four.components.active_disc import ActiveDisc
from gesture_four.components.animation_drop import DropAnimation
from gesture_four.components.animation_fall import FallAnimation
from gesture_four.components.board import Board
from gesture_four.components.disc_kind import DiscKind
from gesture_four.components.explosion import Explosion
from gesture_four.components.game_state import GameMode
from gesture_four.components.landing_progress import LandingProgress
from gesture_four.components.player import BombInventory, PlayerIdentity
from gesture_four.components.preview_disc import PreviewDisc
from gesture_four.constants import WIN_DISPLAY_DURATION
from gesture_four.ui.layout import BoardGeometry
from gesture_four.utils.world_queries import (
    board_geometry,
    current_mode,
    current_player_entity,
    match_state,
    player_identity,
    singleton,
)

Position = Tuple[int, int]
Color = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class CellView:
    owner: Optional[int]
    rotation: Optional[float]
    kind: Optional[DiscKind]


@dataclass(frozen=True, slots=True)
class DiscView:
    x: float
    y: float
    radius: float
    color: Color
    kind: DiscKind
    rotation: float = 0.0
    grabbed: bool = False


@dataclass(frozen=True, slots=True)
class PreviewView:
    x: float
    y: float
    row: int
    col: int
    radius: float
    color: Color
    kind: DiscKind


@dataclass(frozen=True, slots=True)
class FallView:
    owner: Optional[int]
    kind: Optional[DiscKind]
    rotation: Optional[float]
    start: Tuple[float, float]
    end: Tuple[float, float]
    progress: float
    dst: Position


@dataclass(frozen=True, slots=True)
class ExplosionView:
    x: float
    y: float
    radius: float
    alpha: float
    color: Color


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything drawn in a frame. Coordinates are y-down window pixels."""

    mode: GameMode
    geometry: BoardGeometry
    cells: Tuple[Tuple[CellView, ...], ...]
    active_disc: Optional[DiscView]
    preview: Optional[PreviewView]
    drops: Tuple[DiscView, ...]
    falls: Tuple[FallView, ...]
    explosions: Tuple[ExplosionView, ...]
    current_player: int
    player_names: Dict[int, str]
    player_colors: Dict[int, Color]
    bombs: Dict[int, int]
    bomb_selected: bool
    game_over: bool
    winner: Optional[int]
    winning_positions: Tuple[Position, ...]
    countdown: float
    landing_progress: float
    hidden_cells: frozenset = field(default_factory=frozenset)

    def cell(self, row: int, col: int) -> CellView:
        return self.cells[row][col]


def build_snapshot(world: World) -> GameSnapshot:
    board = singleton(world, Board)
    geometry = board_geometry(world)
    cells = tuple(
        tuple(CellView(cell.owner, cell.rotation, cell.kind) for cell in row)
        for row in board.cells
    )

    active = None
    preview = None
    for _, (disc, pre) in world.get_components(ActiveDisc, PreviewDisc):
        active = DiscView(disc.x, disc.y, disc.radius, disc.color, disc.kind, grabbed=disc.grabbed)
        if pre.visible:
            preview = PreviewView(pre.x, pre.y, pre.row, pre.col, pre.radius, pre.color, pre.kind)
        break

    drops = tuple(
        DiscView(d.x, d.y, d.radius, d.color, d.kind, rotation=d.rotation)
        for _, d in sorted(world.get_component(DropAnimation), key=lambda item: item[0])
    )

    falls = []
    for _, fall in world.get_component(FallAnimation):
        # The board already holds the disc at its destination.
        cell = board.cells[fall.dst[0]][fall.dst[1]]
        falls.append(FallView(cell.owner, cell.kind, cell.rotation, fall.start, fall.end, fall.linear, fall.dst))

    explosions = tuple(
        ExplosionView(e.x, e.y, e.radius, e.alpha, e.color)
        for _, e in world.get_component(Explosion)
    )

    names: Dict[int, str] = {}
    colors: Dict[int, Color] = {}
    bombs: Dict[int, int] = {}
    for _, (identity, inventory) in world.get_components(PlayerIdentity, BombInventory):
        names[identity.number] = identity.name
        colors[identity.number] = identity.color
        bombs[identity.number] = inventory.count

    owner = current_player_entity(world)
    current = player_identity(world, owner).number if owner is not None else 1
    state = match_state(world)
    countdown = max(0.0, WIN_DISPLAY_DURATION - state.win_timer) if state.game_over else 0.0

    return GameSnapshot(
        mode=current_mode(world),
        geometry=geometry,
        cells=cells,
        active_disc=active,
        preview=preview,
        drops=drops,
        falls=tuple(falls),
        explosions=explosions,
        current_player=current,
        player_names=names,
        player_colors=colors,
        bombs=bombs,
        bomb_selected=active is not None and active.kind is DiscKind.BOMB,
        game_over=state.game_over,
        winner=state.winner,
        winning_positions=tuple(state.winning_positions),
        countdown=countdown,
        landing_progress=singleton(world, LandingProgress).fraction,
        hidden_cells=frozenset(f.dst for f in falls if f.progress < 1.0),
    )
