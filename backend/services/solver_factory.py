# services/solver_factory.py
from typing import Dict, Callable, List
from core.exceptions import NotRegistered
from core.interfaces import AssignmentStrategy

_solver_registry: Dict[str, Callable[[], AssignmentStrategy]] = {}
_registered = False


def register_solver(name: str, ctor: Callable[[], AssignmentStrategy]) -> None:
    key = name.lower().strip()
    if key in _solver_registry:
        raise ValueError(f"Strategy '{name}' is already registered.")
    _solver_registry[key] = ctor


def get_solver(name: str) -> AssignmentStrategy:
    key = name.lower().strip()
    # Lazy init in case app lifespan didn't run
    if key not in _solver_registry:
        register_solvers()
    if key not in _solver_registry:
        raise NotRegistered(f"Strategy '{name}' is not registered.")
    return _solver_registry[key]()


def list_solvers() -> List[str]:
    # ensure the built-ins are registered before listing
    if not _solver_registry:
        register_solvers()
    return sorted(_solver_registry.keys())


def register_solvers() -> None:
    """Call once at startup/tests to register built-ins."""
    global _registered
    if _registered:
        return
    from services.solvers.greedy_solver import GreedyChainingSolver
    from services.solvers.mincost_solver import MinCostSingleRideSolver
    from services.solvers.auto_solver import AutoSolver

    register_solver("greedy", GreedyChainingSolver)
    register_solver("mincost", MinCostSingleRideSolver)
    register_solver("auto", AutoSolver)

    _registered = True
