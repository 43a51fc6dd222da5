# backend/tests/test_solvers_mincost.py
from services.solvers.greedy_solver import GreedyChainingSolver
from services.solvers.mincost_solver import MinCostSingleRideSolver
from data_toy import HADERA, HADERA_EAST, PETAH_TIKVA, make_driver, make_ride, synthetic_day


def test_one_ride_per_driver(haversine):
    driver = make_driver("d1", home=HADERA, shifts=[("06:00", "14:00")])
    rides = [
        make_ride("early", start="07:00", end="08:00", pickup=HADERA, dropoff=HADERA_EAST),
        make_ride("late", start="08:30", end="09:30", pickup=HADERA_EAST, dropoff=PETAH_TIKVA),
    ]

    result = MinCostSingleRideSolver(haversine).run(rides, [driver])

    assert result.meta.name == "mincost"
    assert [(a.ride.id, a.driver.id) for a in result.assignments] == [("early", "d1")]
    assert result.unserved == ["late"]
    # greedy chains the same driver through both
    assert GreedyChainingSolver(haversine).run(rides, [driver]).served == 2


def test_picks_cheapest_and_moves_on(haversine):
    cheap = make_driver("cheap", fuel=1.0)
    pricey = make_driver("pricey", fuel=3.0)
    rides = [make_ride("r1", start="08:00", end="09:00"), make_ride("r2", start="10:00", end="11:00")]

    result = MinCostSingleRideSolver(haversine).run(rides, [pricey, cheap])

    assert [(a.ride.id, a.driver.id) for a in result.assignments] == [("r1", "cheap"), ("r2", "pricey")]
    assert result.objective == sum(a.total_cost_ag for a in result.assignments)


def test_never_serves_more_rides_than_drivers(haversine):
    drivers, rides = synthetic_day(n_drivers=4, n_rides=30)
    result = MinCostSingleRideSolver(haversine).run(rides, drivers)
    assert result.served <= len(drivers)
    assert len({a.driver.id for a in result.assignments}) == result.served
    assert result.served + len(result.unserved) == len(rides)


def test_empty_inputs(haversine):
    result = MinCostSingleRideSolver(haversine).run([], [])
    assert result.served == 0 and result.objective == 0
