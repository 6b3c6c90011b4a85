from __future__ import annotations


def test_health_reports_service_build_info(client, monkeypatch) -> None:
    monkeypatch.setenv("VLANPOOL_VERSION", "1.4.0")

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "vlanpool"
    assert response.json()["version"] == "1.4.0"


def test_vlan_crud(client) -> None:
    created = client.post("/vlans", json={"name": " Peering LAN ", "number": 10})
    assert created.status_code == 201
    vlan_id = created.json()["id"]
    assert created.json()["name"] == "Peering LAN"

    duplicate = client.post("/vlans", json={"name": "Peering LAN"})
    assert duplicate.status_code == 409

    listed = client.get("/vlans")
    assert [vlan["name"] for vlan in listed.json()] == ["Peering LAN"]

    updated = client.patch(f"/vlans/{vlan_id}", json={"number": None})
    assert updated.status_code == 200
    assert updated.json()["number"] is None
    assert updated.json()["name"] == "Peering LAN"

    assert client.get(f"/vlans/{vlan_id}").status_code == 200
    assert client.delete(f"/vlans/{vlan_id}").status_code == 204
    assert client.get(f"/vlans/{vlan_id}").status_code == 404
    assert client.delete(f"/vlans/{vlan_id}").status_code == 404


def test_vlan_validation(client) -> None:
    assert client.post("/vlans", json={"name": "   "}).status_code == 422
    assert client.post("/vlans", json={"name": "Bad tag", "number": 4095}).status_code == 422


def test_vlan_interfaces(client) -> None:
    vlan_id = client.post("/vlans", json={"name": "Peering LAN"}).json()["id"]

    created = client.post(f"/vlans/{vlan_id}/interfaces", json={"name": "member-1"})
    duplicate = client.post(f"/vlans/{vlan_id}/interfaces", json={"name": "member-1"})
    listed = client.get(f"/vlans/{vlan_id}/interfaces")

    assert created.status_code == 201
    assert created.json()["vlan_id"] == vlan_id
    assert duplicate.status_code == 409
    assert [item["name"] for item in listed.json()] == ["member-1"]
    assert client.get("/vlans/999/interfaces").status_code == 404
