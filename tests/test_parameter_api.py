"""HTTP contract for /parameter."""

from __future__ import annotations


def test_create_and_get_parameter(client, pressure):
    resp = client.post("/parameter", json=pressure)
    assert resp.status_code == 201
    assert resp.headers["location"] == "/parameter/1"
    assert resp.json() == {"id": 1, **pressure}

    resp = client.get("/parameter/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, **pressure}


def test_equipment_id_is_not_validated(client, pressure):
    resp = client.post("/parameter", json={**pressure, "equipmentId": 77})
    assert resp.status_code == 201
    assert resp.json()["equipmentId"] == 77


def test_equipment_id_defaults_to_zero(client):
    resp = client.post(
        "/parameter", json={"name": "Pressure", "description": "d2", "equipmentCode": "PUMP1"}
    )
    assert resp.status_code == 201
    assert resp.json()["equipmentId"] == 0


def test_list_parameters_in_creation_order(client, pressure):
    client.post("/parameter", json=pressure)
    client.post("/parameter", json={**pressure, "name": "Temperature", "equipmentId": 2})

    resp = client.get("/parameter")
    assert resp.status_code == 200
    assert [(p["id"], p["name"]) for p in resp.json()] == [(1, "Pressure"), (2, "Temperature")]


def test_put_keeps_equipment_id(client, pump, pressure):
    client.post("/equipment", json=pump)
    client.post("/parameter", json=pressure)

    resp = client.put(
        "/parameter/1",
        json={"name": "Level", "description": "d3", "equipmentCode": "TANK1", "equipmentId": 5},
    )
    assert resp.status_code == 204

    body = client.get("/parameter/1").json()
    assert body == {
        "id": 1,
        "name": "Level",
        "description": "d3",
        "equipmentCode": "TANK1",
        "equipmentId": 1,
    }
    assert client.get("/equipment/1").json()["parameters"][0]["name"] == "Level"


def test_put_unknown_parameter_is_404(client, pressure):
    resp = client.put("/parameter/8", json=pressure)
    assert resp.status_code == 404
    assert resp.content == b""


def test_delete_parameter_detaches_it(client, pump, pressure):
    client.post("/equipment", json=pump)
    client.post("/parameter", json=pressure)

    assert client.delete("/parameter/1").status_code == 204
    assert client.get("/parameter/1").status_code == 404
    assert client.get("/equipment/1").json()["parameters"] == []
    assert client.delete("/parameter/1").status_code == 404


def test_missing_equipment_code_is_400(client):
    resp = client.post("/parameter", json={"name": "Pressure", "description": "d2"})
    assert resp.status_code == 400


def test_snake_case_keys_are_accepted(client):
    resp = client.post(
        "/parameter",
        json={"name": "Pressure", "description": "d2", "equipment_code": "PUMP1", "equipment_id": 3},
    )
    assert resp.status_code == 201
    assert resp.json()["equipmentCode"] == "PUMP1"
    assert resp.json()["equipmentId"] == 3


def test_equipment_id_beyond_int32_is_400(client, pressure):
    resp = client.post("/parameter", json={**pressure, "equipmentId": 2**70})
    assert resp.status_code == 400
    assert any(error["loc"][-1] == "equipmentId" for error in resp.json()["detail"])

    resp = client.post("/parameter", json={**pressure, "equipmentId": -(2**31) - 1})
    assert resp.status_code == 400
    assert client.get("/parameter").json() == []


def test_parameter_id_beyond_int32_is_400(client, pressure):
    assert client.get("/parameter/99999999999999999999").status_code == 400
    assert client.put(f"/parameter/{2**40}", json=pressure).status_code == 400
    assert client.delete(f"/parameter/{2**40}").status_code == 400
