# backend/tests/test_metrics.py
from services.metrics import group_by_driver
from services.solvers.greedy_solver import GreedyChainingSolver
from data_toy import FixedEstimator, make_driver, make_ride


def test_group_by_driver_keeps_assignment_order():
    est = FixedEstimator(minutes=0, km=10.0)
    drivers = [make_driver("d1", fuel=1.0), make_driver("d2", fuel=2.0)]
    rides = [
        make_ride("r1", start="07:00", end="08:00"),
        make_ride("r2", start="07:30", end="08:30"),
        make_ride("r3", start="09:00", end="09:30"),
    ]
    result = GreedyChainingSolver(est).run(rides, drivers)
    plan = group_by_driver(result)

    assert plan.strategy == "greedy"
    assert [(p.driver_id, p.ride_ids) for p in plan.assignments] == [
        ("d1", ["r1", "r3"]),
        ("d2", ["r2"]),
    ]
    # r1: 3000 + 1000, r3: 1500 + 1000, r2: 3000 + 2000
    assert [p.total_cost_ag for p in plan.assignments] == [6500, 5000]
    assert plan.objective_ag == 11500
    assert plan.total_cost_shekels == 115.0
    assert plan.served == 3 and plan.unserved == []


def test_group_by_driver_empty_result():
    plan = group_by_driver(GreedyChainingSolver(FixedEstimator()).run([], []))
    assert plan.assignments == [] and plan.objective_ag == 0
