"""
Integration tests for spell list endpoints.
"""

import pytest
from tests.fixtures.sheet_fixtures import SAMPLE_ORDER


class TestActionEndpoints:
    """Tests for /actions."""

    @pytest.mark.integration
    @pytest.mark.api
    async def test_list_actions(self, client):
        """Test the full catalog comes back in display order."""
        response = await client.get("/actions")

        assert response.status_code == 200
        data = response.json()
        assert [entry["action_id"] for entry in data["actions"]] == SAMPLE_ORDER
        assert data["visible_count"] == data["total_count"] == len(SAMPLE_ORDER)

    @pytest.mark.integration
    @pytest.mark.api
    async def test_get_action(self, client):
        """Test getting one spell."""
        response = await client.get("/actions/104")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "#5: Final Sting"
        assert data["spell_type"] == "physical"
        assert data["effects"] == ["paralysis", "sleep"]
        assert data["cast_time"] == "6s"
        assert data["recast_time"] == "60s"
        assert data["is_unlocked"] is False

    @pytest.mark.integration
    @pytest.mark.api
    async def test_get_action_not_found(self, client):
        """Test an unknown action id returns 404."""
        response = await client.get("/actions/999")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    @pytest.mark.integration
    @pytest.mark.api
    async def test_visible_follows_filters(self, client):
        """Test the visible list reflects the filter state."""
        await client.post("/filters/toggle", json={"category": "type", "value": "physical"})

        response = await client.get("/actions/visible")

        assert response.status_code == 200
        data = response.json()
        assert [entry["action_id"] for entry in data["actions"]] == [102, 104]
        assert data["visible_count"] == 2
        assert data["total_count"] == len(SAMPLE_ORDER)

    @pytest.mark.integration
    @pytest.mark.api
    async def test_set_unlocked(self, client):
        """Test setting the unlock state of one spell."""
        response = await client.put("/actions/101/unlocked", json={"is_unlocked": True})

        assert response.status_code == 200
        assert response.json()["is_unlocked"] is True

        response = await client.get("/actions/101")
        assert response.json()["is_unlocked"] is True

    @pytest.mark.integration
    @pytest.mark.api
    async def test_set_unlocked_not_found(self, client):
        """Test unlocking an unknown spell returns 404."""
        response = await client.put("/actions/999/unlocked", json={"is_unlocked": True})

        assert response.status_code == 404

    @pytest.mark.integration
    @pytest.mark.api
    async def test_unlock_does_not_hide(self, client):
        """Test locked spells stay visible."""
        await client.put("/actions/101/unlocked", json={"is_unlocked": True})

        response = await client.get("/actions/visible")

        assert response.json()["visible_count"] == len(SAMPLE_ORDER)
