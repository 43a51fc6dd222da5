# services/metrics.py
from typing import Dict, List
from core.logic.cost_functions import from_agorot
from models.solvers import AssignmentPlan, DriverPlan, StrategyResult


def group_by_driver(result: StrategyResult) -> AssignmentPlan:
    """driver -> ride ids in assignment order, plus totals for the output layer."""
    by_driver: Dict[str, DriverPlan] = {}
    order: List[str] = []
    for a in result.assignments:
        plan = by_driver.get(a.driver.id)
        if plan is None:
            plan = by_driver[a.driver.id] = DriverPlan(
                driver_id=a.driver.id, ride_ids=[], total_cost_ag=0
            )
            order.append(a.driver.id)
        plan.ride_ids.append(a.ride.id)
        plan.total_cost_ag += a.total_cost_ag

    objective = int(result.objective)
    return AssignmentPlan(
        strategy=result.meta.name,
        assignments=[by_driver[d] for d in order],
        served=result.served,
        unserved=list(result.unserved),
        objective_ag=objective,
        total_cost_shekels=from_agorot(objective),
        elapsed_ms=result.meta.elapsed_ms,
    )
