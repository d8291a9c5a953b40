"""Game session API routes."""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from typing import Optional

from ...config import Settings
from ...core.clock import format_elapsed
from ...core.freedom import OcclusionIndex, is_free
from ...models.schemas import (
    NewGameRequest,
    TileSchema,
    GameStateResponse,
    SelectRequest,
    SelectResponse,
    HintResponse,
    TileFreeResponse,
    ErrorResponse,
)
from ...utils.helpers import board_extent, format_board_for_display, tile_placement
from ..deps import get_app_settings, get_store
from ..sessions import GameNotFoundError, GameSession, GameStore

router = APIRouter(prefix="/api/games", tags=["games"])

# Status messages
MSG_NEW_GAME = "New game started."
MSG_MATCHED = "Pair matched."
MSG_STUCK = "No free pairs left. Press 'Shuffle'."
MSG_RESHUFFLED = "Remaining tiles shuffled."
MSG_NO_HINT = "No hint: no free pairs left."


def _get_session(store: GameStore, game_id: str) -> GameSession:
    try:
        return store.get(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")


def _victory_message(session: GameSession) -> str:
    controller = session.controller
    return (
        f"Victory! Time {format_elapsed(controller.elapsed_seconds())}, "
        f"moves: {controller.moves_made()}."
    )


def _finish_if_needed(session: GameSession) -> None:
    """Set the won/stuck status message when the game has reached one."""
    controller = session.controller
    if controller.is_won():
        session.message = _victory_message(session)
    elif controller.is_stuck():
        session.message = MSG_STUCK


def _build_state(session: GameSession) -> GameStateResponse:
    """Build the full game state response for a session."""
    controller = session.controller
    board = controller.board
    snapshot = controller.snapshot()
    index = OcclusionIndex(board)

    tiles = []
    for record, tile in zip(snapshot, board):
        left, top, z_index = tile_placement(record)
        tiles.append(TileSchema(
            **record,
            free=is_free(tile, board, index),
            left=left,
            top=top,
            z_index=z_index,
        ))

    width, height = board_extent(snapshot)
    status = controller.status
    elapsed = controller.elapsed_seconds()

    return GameStateResponse(
        game_id=session.game_id,
        tiles=tiles,
        pairs_remaining=controller.pairs_remaining(),
        moves_made=controller.moves_made(),
        elapsed_seconds=elapsed,
        elapsed_display=format_elapsed(elapsed),
        selected_id=controller.selected_id,
        status=status.value,
        won=controller.is_won(),
        stuck=controller.is_stuck(),
        board_width=width,
        board_height=height,
        message=session.message,
    )


@router.post("", response_model=GameStateResponse, status_code=201)
async def create_game(
    request: Optional[NewGameRequest] = None,
    store: GameStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> GameStateResponse:
    """
    Create a game session and deal the first board.

    Args:
        request: Optional NewGameRequest with a seed.
        store: GameStore dependency.
        settings: Settings dependency.

    Returns:
        GameStateResponse for the new session.
    """
    seed = request.seed if request and request.seed is not None else settings.default_seed
    session = store.create(seed=seed)
    session.message = MSG_NEW_GAME
    return _build_state(session)


@router.get(
    "/{game_id}",
    response_model=GameStateResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameStateResponse:
    """Get the current state of a game."""
    return _build_state(_get_session(store, game_id))


@router.delete(
    "/{game_id}",
    status_code=204,
    response_model=None,
    responses={404: {"model": ErrorResponse}},
)
async def delete_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> None:
    """Discard a game session."""
    try:
        store.delete(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")


@router.post(
    "/{game_id}/new",
    response_model=GameStateResponse,
    responses={404: {"model": ErrorResponse}},
)
async def new_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameStateResponse:
    """Deal a fresh board in an existing session."""
    session = _get_session(store, game_id)
    session.controller.new_game()
    session.message = MSG_NEW_GAME
    return _build_state(session)


@router.post(
    "/{game_id}/select",
    response_model=SelectResponse,
    responses={404: {"model": ErrorResponse}},
)
async def select_tile(
    game_id: str,
    request: SelectRequest,
    store: GameStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SelectResponse:
    """
    Choose a tile.

    Blocked, removed and unknown tiles are ignored and reported with
    changed=false.

    Args:
        game_id: Session id.
        request: SelectRequest with the tile id.
        store: GameStore dependency.
        settings: Settings dependency.

    Returns:
        SelectResponse describing the transition.
    """
    session = _get_session(store, game_id)
    controller = session.controller
    result = controller.select_tile(request.tile_id)

    if result.matched:
        session.message = MSG_MATCHED
        _finish_if_needed(session)

    return SelectResponse(
        **result.to_dict(),
        pairs_remaining=controller.pairs_remaining(),
        moves_made=controller.moves_made(),
        removal_fade_ms=settings.removal_fade_ms,
        message=session.message,
    )


@router.post(
    "/{game_id}/reshuffle",
    response_model=GameStateResponse,
    responses={404: {"model": ErrorResponse}},
)
async def reshuffle(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameStateResponse:
    """Reshuffle the face values of the remaining tiles."""
    session = _get_session(store, game_id)
    controller = session.controller

    if controller.board.remaining >= 2:
        controller.reshuffle()
        session.message = MSG_RESHUFFLED
    _finish_if_needed(session)

    return _build_state(session)


@router.get(
    "/{game_id}/hint",
    response_model=HintResponse,
    responses={404: {"model": ErrorResponse}},
)
async def hint(
    game_id: str,
    store: GameStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> HintResponse:
    """Get the first available pair without changing the game."""
    session = _get_session(store, game_id)
    controller = session.controller
    pair = controller.hint()

    if pair is None:
        session.message = MSG_NO_HINT
        return HintResponse(
            highlight_ms=settings.hint_highlight_ms,
            message=session.message,
        )

    face_value = controller.board.get(pair[0]).face_value
    session.message = f"Hint: found pair {face_value}."
    return HintResponse(
        tile_ids=list(pair),
        face_value=face_value,
        highlight_ms=settings.hint_highlight_ms,
        message=session.message,
    )


@router.get(
    "/{game_id}/tiles/{tile_id}/free",
    response_model=TileFreeResponse,
    responses={404: {"model": ErrorResponse}},
)
async def tile_free(
    game_id: str,
    tile_id: int,
    store: GameStore = Depends(get_store),
) -> TileFreeResponse:
    """Check whether a tile can be selected."""
    session = _get_session(store, game_id)
    return TileFreeResponse(tile_id=tile_id, free=session.controller.is_free(tile_id))


@router.get(
    "/{game_id}/text",
    response_class=PlainTextResponse,
    responses={404: {"model": ErrorResponse}},
)
async def board_text(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> str:
    """Render the board as plain text."""
    session = _get_session(store, game_id)
    return format_board_for_display(session.controller.snapshot())
