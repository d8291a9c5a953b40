"""Autoplay simulation API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import SimulateRequest, SimulateResponse, ErrorResponse
from ...core.simulator import GameSimulator, SimulationStrategy
from ..deps import get_game_simulator

router = APIRouter(prefix="/api", tags=["simulate"])

# Lookahead scores every available pair on each move
MAX_LOOKAHEAD_ITERATIONS = 200


@router.post(
    "/simulate",
    response_model=SimulateResponse,
    responses={400: {"model": ErrorResponse}},
)
def simulate_games(
    request: SimulateRequest,
    simulator: GameSimulator = Depends(get_game_simulator),
) -> SimulateResponse:
    """
    Play complete games with a scripted player.

    Declared without async so FastAPI runs it in the threadpool. The
    simulator builds its own controllers and never reads the session store.

    Args:
        request: SimulateRequest with simulation parameters.
        simulator: GameSimulator dependency.

    Returns:
        SimulateResponse with simulation statistics.
    """
    try:
        # Validate strategy
        valid_strategies = [s.value for s in SimulationStrategy]
        if request.strategy not in valid_strategies:
            raise ValueError(f"Invalid strategy. Must be one of: {valid_strategies}")
        if (
            request.strategy == SimulationStrategy.LOOKAHEAD.value
            and request.iterations > MAX_LOOKAHEAD_ITERATIONS
        ):
            raise ValueError(
                f"Lookahead allows at most {MAX_LOOKAHEAD_ITERATIONS} iterations"
            )

        result = simulator.simulate(
            iterations=request.iterations,
            strategy=request.strategy,
            max_reshuffles=request.max_reshuffles,
            seed=request.seed,
        )

        return SimulateResponse(**result.to_dict())
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Simulation failed: {str(e)}")
