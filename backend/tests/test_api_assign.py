# backend/tests/test_api_assign.py
from config import settings
from data_toy import raw_driver, raw_ride


def _payload(**extra):
    body = {
        "drivers": [raw_driver("driver1")],
        "rides": [raw_ride("ride1"), raw_ride("ride2", startTime="09:30", endTime="10:00")],
    }
    body.update(extra)
    return body


def test_assign_greedy_chains_both_rides(client):
    r = client.post("/assign", json=_payload(strategy="greedy"))
    assert r.status_code == 200, r.text
    j = r.json()
    assert j["status"] == "success"
    data = j["data"]
    assert data["strategy"] == "greedy"
    assert data["served"] == 2
    assert data["assignments"] == [
        {"driver_id": "driver1", "ride_ids": ["ride1", "ride2"], "total_cost_ag": data["objective_ag"]}
    ]
    assert data["total_cost_shekels"] == data["objective_ag"] / 100


def test_assign_auto_is_the_default(client):
    r = client.post("/assign", json=_payload())
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    # mincost serves one ride, greedy chains both
    assert data["strategy"] == "greedy"
    assert data["served"] == 2


def test_assign_with_deadhead_options(client):
    far = raw_driver("far", city_coords=[32.7940, 34.9896])  # Haifa
    body = _payload(
        drivers=[far],
        rides=[raw_ride("ride1", startTime="09:00", endTime="10:00")],
        strategy="greedy",
        options={"include_deadhead_time": True, "include_deadhead_fuel": True},
    )
    plain = client.post("/assign", json={**body, "options": {}}).json()["data"]
    loaded = client.post("/assign", json=body).json()["data"]
    assert loaded["objective_ag"] > plain["objective_ag"]


def test_unserved_rides_are_reported(client):
    late = raw_ride("late", startTime="20:00", endTime="21:00")
    r = client.post("/assign", json=_payload(rides=[late], strategy="greedy"))
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["served"] == 0 and data["unserved"] == ["late"]


def test_unknown_strategy_is_404(client):
    r = client.post("/assign", json=_payload(strategy="simulated-annealing"))
    assert r.status_code == 404
    assert "simulated-annealing" in r.json()["detail"]


def test_bad_record_is_400(client):
    r = client.post("/assign", json=_payload(rides=[raw_ride(startTime="24:30")]))
    assert r.status_code == 400
    assert "ride #0" in r.json()["detail"]


def test_compare_reports_every_candidate(client):
    r = client.post("/assign/compare", json=_payload())
    assert r.status_code == 200, r.text
    rows = {row["strategy"]: row for row in r.json()["data"]}
    assert set(rows) == {"mincost", "greedy"}
    assert rows["mincost"]["served"] == 1
    assert rows["greedy"]["served"] == 2
    assert not any(row["failed"] for row in rows.values())


def test_status_lists_registered_names(client):
    strategies = client.get("/status/strategies").json()["strategies"]
    assert {"auto", "greedy", "mincost"} <= set(strategies)
    adapters = client.get("/status/adapters").json()["adapters"]
    assert {"haversine", "osrm"} <= set(adapters)


def test_status_describes_auto_selector(client):
    auto = client.get("/status/strategies").json()["auto"]
    assert auto["candidates"] == ["mincost", "greedy"]
    assert auto["budget_s"] == 5.0
    osrm = client.get("/status/adapters").json()["osrm"]
    assert osrm["base_url"] == "http://osrm.test"


def test_misconfigured_auto_candidate_is_404_on_both_routes(client, monkeypatch):
    monkeypatch.setattr(settings, "AUTO_CANDIDATES", ["greedy", "simulated-annealing"])
    for path in ("/assign", "/assign/compare"):
        r = client.post(path, json=_payload())
        assert r.status_code == 404, (path, r.text)
        assert "simulated-annealing" in r.json()["detail"]


def test_objective_is_whole_agorot(client):
    data = client.post("/assign", json=_payload(strategy="greedy")).json()["data"]
    assert isinstance(data["objective_ag"], int)
    rows = client.post("/assign/compare", json=_payload()).json()["data"]
    assert all(isinstance(row["objective_ag"], int) for row in rows)
