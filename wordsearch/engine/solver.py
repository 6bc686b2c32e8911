"""CP-SAT word placement solver using OR-Tools."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import Direction
from ..core.models import Position
from ..utils.logger import get_logger
from .grid import LetterGrid

LOGGER = get_logger(__name__)

# (word index, start cell, direction)
Placement = Tuple[int, Position, Direction]


def solve_placements(
    words: Sequence[str],
    size: int,
    rng: random.Random,
    timeout: float = 5.0,
    max_candidates: int = 400,
    num_workers: int = 4,
) -> Optional[List[Placement]]:
    """Choose at most one placement per word, maximizing the words placed.

    Args:
        words: Normalized words, already filtered to fit on the board.
        size: Board dimension.
        rng: Source used to sample and order candidate placements, so that
            repeated calls produce different layouts.
        timeout: Solver time limit in seconds.
        max_candidates: Cap on sampled start/direction pairs per word.
        num_workers: CP-SAT search workers.

    Returns:
        Chosen placements in word order, or None if the solver found nothing.
    """
    if not words:
        return []

    model = cp_model.CpModel()
    board = LetterGrid(size)

    # ------------------------------------------------------------------
    # Step 1: Candidate placement variables
    # ------------------------------------------------------------------
    placement_vars: Dict[int, List[Tuple[object, Position, Direction]]] = {}
    letter_vars: Dict[Tuple[Position, str], object] = {}

    for index, word in enumerate(words):
        candidates = [
            ((r, c), direction)
            for direction in Direction
            for r in range(size)
            for c in range(size)
            if board.fits((r, c), direction, len(word))
        ]
        rng.shuffle(candidates)
        candidates = candidates[:max_candidates]

        options = []
        for start, direction in candidates:
            x = model.new_bool_var(f"P_{index}_{start[0]}_{start[1]}_{direction.value}")
            for letter, cell in zip(word, board.line(start, direction, len(word))):
                key = (cell, letter)
                if key not in letter_vars:
                    letter_vars[key] = model.new_bool_var(f"L_{cell[0]}_{cell[1]}_{letter}")
                model.add_implication(x, letter_vars[key])
            options.append((x, start, direction))
        if options:
            model.add_at_most_one([x for x, _, _ in options])
        placement_vars[index] = options

    # ------------------------------------------------------------------
    # Step 2: One letter per cell
    # ------------------------------------------------------------------
    by_cell: Dict[Position, List[object]] = {}
    for (cell, _), var in letter_vars.items():
        by_cell.setdefault(cell, []).append(var)
    for cell_letters in by_cell.values():
        if len(cell_letters) > 1:
            model.add_at_most_one(cell_letters)

    all_choices = [x for options in placement_vars.values() for x, _, _ in options]
    model.maximize(cp_model.LinearExpr.sum(all_choices))

    # ------------------------------------------------------------------
    # Step 3: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = num_workers
    solver.parameters.random_seed = rng.randint(0, 2**31 - 1)

    LOGGER.info(
        "CP-SAT: %d words, %d placement vars, solving (timeout=%0.1fs)...",
        len(words),
        len(all_choices),
        timeout,
    )
    status = solver.solve(model)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        return None

    LOGGER.info(
        "CP-SAT: %s solution placing %d/%d words in %.2fs",
        solver.status_name(status),
        int(solver.objective_value),
        len(words),
        solver.wall_time,
    )

    # ------------------------------------------------------------------
    # Step 4: Extract solution
    # ------------------------------------------------------------------
    chosen: List[Placement] = []
    for index in range(len(words)):
        for x, start, direction in placement_vars[index]:
            if solver.boolean_value(x):
                chosen.append((index, start, direction))
                break
    return chosen
