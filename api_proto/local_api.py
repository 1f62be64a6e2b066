from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from nonogram import run_solver
from nonogram.config import PRUNE_COMPLETED_ROWS
from nonogram.logging_utils import get_logger
from nonogram.samples import SAMPLE_PUZZLES, SAMPLE_SOLUTIONS

logger = get_logger()

app = FastAPI()

class SolveRequest(BaseModel):
    column_clues: list[list[int]]  # left to right
    row_clues: list[list[int]]  # top to bottom
    prune_rows: bool = PRUNE_COMPLETED_ROWS

@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives column/row clues and returns the first grid satisfying all of them.
    An unsatisfiable puzzle is not an error: the response has solved=false.
    """
    try:
        return run_solver(
            request.column_clues,
            request.row_clues,
            prune_rows=request.prune_rows,
        )
    except ValueError as e:
        # 0 以下のヒントなど、入力そのものが不正
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("solve failed")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/api/samples")
async def api_samples():
    """
    Lists the bundled sample puzzles with their expected solutions.
    """
    return {
        name: {
            "column_clues": cols,
            "row_clues": rows,
            "solution": SAMPLE_SOLUTIONS[name],
        }
        for name, (cols, rows) in SAMPLE_PUZZLES.items()
    }
