import pytest


@pytest.mark.asyncio
async def test_list_alerts_newest_first(client, auth_headers):
    response = await client.get("/alerts", headers=auth_headers)

    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == ["1", "2"]


@pytest.mark.asyncio
async def test_acknowledge_alert(client, auth_headers):
    response = await client.post("/alerts/1/acknowledge", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["changed"] is True
    assert data["alert"]["status"] == "acknowledged"

    logs = await client.get("/audit/logs", params={"filter": "Alert"}, headers=auth_headers)
    assert len(logs.json()) == 1
    assert logs.json()[0]["user"] == "Admin User"


@pytest.mark.asyncio
async def test_acknowledge_twice_is_unchanged(client, auth_headers):
    await client.post("/alerts/1/acknowledge", headers=auth_headers)
    response = await client.post("/alerts/1/acknowledge", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["changed"] is False


@pytest.mark.asyncio
async def test_resolve_alert(client, auth_headers):
    response = await client.post("/alerts/2/resolve", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["alert"]["status"] == "resolved"


@pytest.mark.asyncio
async def test_acknowledge_unknown_alert(client, auth_headers):
    response = await client.post("/alerts/999/acknowledge", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_acknowledge_requires_session(client):
    response = await client.post("/alerts/1/acknowledge")

    assert response.status_code == 401
