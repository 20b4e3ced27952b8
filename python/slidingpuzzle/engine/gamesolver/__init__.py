from slidingpuzzle.engine.gamesolver import astar, bfs
from slidingpuzzle.engine.gamesolver.heuristics import (
    HEURISTICS,
    Heuristic,
    HeuristicFunction,
    manhattan_distance,
    misplaced_tiles,
)
from slidingpuzzle.engine.gamesolver.priority_queue import PriorityQueue
from slidingpuzzle.engine.gamesolver.solver import Solver, SolverSettings, Strategy
from slidingpuzzle.engine.gamesolver.tree import SearchBudgetExceeded

__all__ = [
    "HEURISTICS",
    "Heuristic",
    "HeuristicFunction",
    "PriorityQueue",
    "SearchBudgetExceeded",
    "Solver",
    "SolverSettings",
    "Strategy",
    "astar",
    "bfs",
    "manhattan_distance",
    "misplaced_tiles",
]
