"""API tests for the health endpoints."""

import pytest


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_ready_when_database_answers(client, fake_db):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}
    fake_db.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_not_ready_when_database_fails(client, fake_db):
    fake_db.execute.side_effect = ConnectionRefusedError("connection refused")

    response = await client.get("/health/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}
