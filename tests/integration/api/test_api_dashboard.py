import pytest


@pytest.mark.asyncio
async def test_dashboard_stats(client, auth_headers):
    response = await client.get("/dashboard/stats", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "active_tourists": 2,
        "recent_sos": 1,
        "recent_alerts": 0,
        "network_health_pct": 87,
    }


@pytest.mark.asyncio
async def test_mesh_status(client, auth_headers):
    response = await client.get("/dashboard/mesh", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["quantum_pairs"] == 12
    assert data["recent_relays"] == 45
    assert data["network_nodes"] == 2


@pytest.mark.asyncio
async def test_behavior_score(client, auth_headers):
    response = await client.get("/dashboard/behavior/DEV001", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["device_id"] == "DEV001"
    assert data["risk_level"] in ("low", "medium", "high")
    assert len(data["factors"]) == 4
