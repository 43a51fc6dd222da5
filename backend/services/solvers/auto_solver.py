# services/solvers/auto_solver.py
from __future__ import annotations
import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeout
from functools import reduce
from typing import List, Optional, Sequence, Tuple

from config import settings
from core.exceptions import InvalidArgument, NoViableStrategy
from core.interfaces import AssignmentStrategy, TravelEstimator
from models.fleet import Driver
from models.rides import Ride
from models.solvers import AssignmentOptions, StrategyResult
from services.solvers.common import batch_estimator

logger = logging.getLogger(__name__)


def better(a: StrategyResult, b: StrategyResult) -> StrategyResult:
    """
    Total order: more rides served, then lower objective, then faster.
    On a full tie the left operand wins, so a fold keeps the earliest candidate.
    """
    if a.served != b.served:
        return a if a.served > b.served else b
    if a.objective != b.objective:
        return a if a.objective < b.objective else b
    if a.meta.elapsed_ms != b.meta.elapsed_ms:
        return a if a.meta.elapsed_ms < b.meta.elapsed_ms else b
    return a


def pick_best(results: Sequence[StrategyResult]) -> StrategyResult:
    viable = [r for r in results if not r.meta.failed]
    if not viable:
        errors = "; ".join(f"{r.meta.name}: {r.meta.error}" for r in results) or "no candidates"
        raise NoViableStrategy(f"every candidate failed ({errors})")
    return reduce(better, viable)


def _spawn(
    strategy: AssignmentStrategy,
    rides: List[Ride],
    drivers: List[Driver],
    options: AssignmentOptions,
    estimator: TravelEstimator,
) -> Future:
    # One throwaway worker per candidate. shutdown(wait=False) lets us walk away
    # from a hung candidate; its thread finishes on its own and the result is dropped.
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"auto-{strategy.name}")
    try:
        return executor.submit(strategy.run, list(rides), list(drivers), options, estimator)
    finally:
        executor.shutdown(wait=False)


class AutoSolver(AssignmentStrategy):
    """
    Races candidate strategies, each under its own wall-clock budget, and
    returns the best whole result. Timed-out or crashed candidates count as
    failed; partial progress is never merged.
    """

    name = "auto"

    def __init__(
        self,
        candidates: Optional[List[AssignmentStrategy]] = None,
        budget_s: Optional[float] = None,
        parallel: Optional[bool] = None,
    ):
        self._candidates = candidates
        self.budget_s = float(budget_s if budget_s is not None else settings.AUTO_CANDIDATE_BUDGET_S)
        self.parallel = settings.AUTO_PARALLEL if parallel is None else bool(parallel)

    @property
    def candidates(self) -> List[AssignmentStrategy]:
        if self._candidates is None:
            # late import: the registry imports this module
            from services.solver_factory import get_solver

            self._candidates = [
                get_solver(name) for name in settings.AUTO_CANDIDATES if name != self.name
            ]
        return self._candidates

    def _collect(
        self, strategy: AssignmentStrategy, future: Future, started: float
    ) -> StrategyResult:
        remaining = max(0.0, started + self.budget_s - time.monotonic())
        try:
            return future.result(timeout=remaining)
        except FuturesTimeout:
            logger.warning(f"auto: candidate '{strategy.name}' timed out after {self.budget_s}s")
            return StrategyResult.failed(
                strategy.name, self.budget_s * 1000.0, f"timed out after {self.budget_s}s"
            )
        except InvalidArgument:
            raise
        except Exception as e:
            logger.warning(f"auto: candidate '{strategy.name}' failed: {e!r}")
            return StrategyResult.failed(
                strategy.name, (time.monotonic() - started) * 1000.0, repr(e)
            )

    def run_all(
        self,
        rides: List[Ride],
        drivers: List[Driver],
        options: Optional[AssignmentOptions] = None,
        estimator: Optional[TravelEstimator] = None,
    ) -> List[StrategyResult]:
        options = options or AssignmentOptions()
        candidates = self.candidates
        results: List[StrategyResult] = []

        # one estimator (and one route cache) for the whole batch, shared by every candidate
        with batch_estimator(estimator, options) as est:
            if self.parallel:
                launched: List[Tuple[AssignmentStrategy, Future, float]] = []
                for s in candidates:
                    launched.append((s, _spawn(s, rides, drivers, options, est), time.monotonic()))
                for s, fut, started in launched:
                    results.append(self._collect(s, fut, started))
            else:
                for s in candidates:
                    started = time.monotonic()
                    results.append(
                        self._collect(s, _spawn(s, rides, drivers, options, est), started)
                    )
        return results

    def run(
        self,
        rides: List[Ride],
        drivers: List[Driver],
        options: Optional[AssignmentOptions] = None,
        estimator: Optional[TravelEstimator] = None,
    ) -> StrategyResult:
        results = self.run_all(rides, drivers, options, estimator)
        best = pick_best(results)
        logger.info(
            f"auto: picked '{best.meta.name}' (served {best.served}, objective {best.objective}) "
            f"from {[r.meta.name for r in results]}"
        )
        return best
