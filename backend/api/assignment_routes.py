# api/assignment_routes.py
import logging

from fastapi import APIRouter

from api._resp import fail, ok
from core.exceptions import InvalidArgument, NoViableStrategy, NotRegistered
from file_handler.ride_loader import load_drivers, load_rides
from models.solvers import AssignRequest
from services.metrics import group_by_driver
from services.solver_factory import get_solver
from services.solvers.auto_solver import AutoSolver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assignment"])


@router.post("/assign", summary="Assign rides to drivers with the chosen strategy")
def assign(req: AssignRequest):
    # sync handler: FastAPI runs it in a worker thread, the engine is CPU-bound
    try:
        drivers = load_drivers(req.drivers)
        rides = load_rides(req.rides)
        strategy = get_solver(req.strategy)
        logger.info(
            f"assign: strategy={req.strategy} drivers={len(drivers)} rides={len(rides)} "
            f"options={req.options.model_dump()}"
        )
        result = strategy.run(rides, drivers, req.options)
    except InvalidArgument as e:
        fail(400, str(e))
    except NotRegistered as e:
        fail(404, str(e))
    except NoViableStrategy as e:
        fail(422, str(e))

    plan = group_by_driver(result)
    return ok(plan)


@router.post("/assign/compare", summary="Run every auto candidate and report each result")
def compare(req: AssignRequest):
    try:
        drivers = load_drivers(req.drivers)
        rides = load_rides(req.rides)
        results = AutoSolver().run_all(rides, drivers, req.options)
    except InvalidArgument as e:
        fail(400, str(e))
    except NotRegistered as e:
        fail(404, str(e))

    return ok(
        [
            {
                "strategy": r.meta.name,
                "served": r.served,
                "objective_ag": None if r.meta.failed else int(r.objective),
                "elapsed_ms": r.meta.elapsed_ms,
                "failed": r.meta.failed,
                "error": r.meta.error,
            }
            for r in results
        ]
    )
