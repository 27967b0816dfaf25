# solver_api.py
# FastAPI wrapper for the propagation solver.
# Run with: uvicorn apps.api.solver_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from propagator.board import MAX_STEPS
from propagator.errors import SudokuError
from propagator.sudoku_tools import grid_to_values, parse_puzzle, sanity_check, solve_tool

app = FastAPI(title="Sudoku Propagation Solver API")


class SolveRequest(BaseModel):
    puzzle: str | None = None
    grid: list[list[int]] | None = None
    max_steps: int = MAX_STEPS
    details: bool = False


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


@app.post("/solve")
def api_solve(req: SolveRequest):
    if (req.puzzle is None) == (req.grid is None):
        raise HTTPException(status_code=422, detail={"error": "BadRequest", "detail": "Send exactly one of 'puzzle' or 'grid'."})
    try:
        values = parse_puzzle(req.puzzle) if req.puzzle is not None else grid_to_values(req.grid)
        return solve_tool(values, max_steps=req.max_steps, details=req.details)
    except (SudokuError, ValueError) as e:
        raise HTTPException(status_code=422, detail={"error": type(e).__name__, "detail": str(e)})


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)
