# -*- coding: utf-8 -*-
"""Integration tests for the Access Sentinel HTTP API."""
import pytest


class TestHealthAndRefresh:
    """/health and /refresh."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "OK"}

    @pytest.mark.asyncio
    async def test_refresh(self, client):
        resp = await client.post("/refresh")

        assert resp.status_code == 200, resp.text
        data = resp.json()
        assert data["generation"] == 1
        assert data["eventCount"] == 6
        assert data["analysisCount"] == 3
        assert data["unreadAlerts"] == 2

    @pytest.mark.asyncio
    async def test_unreadable_source_returns_503(self, client, sentinel, tmp_path):
        from app.modules.access_sentinel.repositories import CSVAccessEventRepository

        sentinel.service.repository = CSVAccessEventRepository(tmp_path / "absent.csv")

        resp = await client.post("/refresh")

        assert resp.status_code == 503
        assert "CSV file not found" in resp.json()["detail"]


class TestTravelAnalysesEndpoints:
    """/travel-analyses endpoints."""

    @pytest.mark.asyncio
    async def test_empty_before_refresh(self, client):
        resp = await client.get("/travel-analyses")
        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.asyncio
    async def test_list_after_refresh(self, client):
        await client.post("/refresh")

        resp = await client.get("/travel-analyses")

        assert resp.status_code == 200
        data = resp.json()
        assert [item["status"] for item in data] == ["impossible", "suspicious", "safe"]
        first = data[0]
        assert first["id"] == "ANALYSIS-A1-A2"
        assert first["staffName"] == "Dr. Rahul Sharma"
        assert first["fromLocation"] == "ICU"
        assert first["toLocation"] == "Pharmacy"
        assert 95 <= first["riskScore"] <= 100

    @pytest.mark.asyncio
    async def test_filter_by_status(self, client):
        await client.post("/refresh")

        resp = await client.get("/travel-analyses", params={"status": "safe"})

        assert [item["id"] for item in resp.json()] == ["ANALYSIS-C1-C2"]

    @pytest.mark.asyncio
    async def test_invalid_status(self, client):
        resp = await client.get("/travel-analyses", params={"status": "weird"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_stats(self, client):
        await client.post("/refresh")

        resp = await client.get("/travel-analyses/stats")

        data = resp.json()
        assert data["total"] == 3
        assert data["impossible"] == 1
        assert data["suspicious"] == 1
        assert data["safe"] == 1
        assert data["flagged"] == 2
        assert data["generation"] == 1


class TestBehaviorEndpoints:
    """/behavior-patterns endpoints."""

    @pytest.mark.asyncio
    async def test_patterns_and_summary(self, client):
        await client.post("/refresh")

        patterns = (await client.get("/behavior-patterns")).json()
        summary = (await client.get("/behavior-patterns/summary")).json()

        assert [pattern["staffId"] for pattern in patterns] == ["1", "2", "3", "4", "5", "6", "7", "8"]
        assert patterns[0]["usualLoginHours"] == {"start": 6, "end": 14}
        assert patterns[3]["lastActivity"] is None
        assert summary["totalAnomalies"] == 0
        assert summary["lowRiskUsers"] == 8


class TestAlertEndpoints:
    """/alerts endpoints."""

    @pytest.mark.asyncio
    async def test_feed_after_refresh(self, client):
        await client.post("/refresh")

        resp = await client.get("/alerts")

        data = resp.json()
        assert data["unreadCount"] == 2
        assert data["capacity"] == 50
        assert [alert["type"] for alert in data["alerts"]] == ["fraud", "suspicious"]
        assert data["alerts"][0]["analysisId"] == "ANALYSIS-A1-A2"

    @pytest.mark.asyncio
    async def test_mark_one_as_read(self, client):
        await client.post("/refresh")

        resp = await client.post("/alerts/ALERT-ANALYSIS-A1-A2/read")

        assert resp.status_code == 200
        assert resp.json()["read"] is True
        assert (await client.get("/alerts")).json()["unreadCount"] == 1

    @pytest.mark.asyncio
    async def test_mark_unknown_alert(self, client):
        resp = await client.post("/alerts/nope/read")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_mark_all_and_clear(self, client):
        await client.post("/refresh")

        resp = await client.post("/alerts/read-all")
        assert resp.json() == {"updated": 2}

        resp = await client.delete("/alerts")
        assert resp.status_code == 204
        assert (await client.get("/alerts")).json()["alerts"] == []

    @pytest.mark.asyncio
    async def test_trigger_test_alert(self, client):
        resp = await client.post("/alerts/test", json={"type": "info"})

        assert resp.status_code == 201
        data = resp.json()
        assert data["type"] == "info"
        assert data["riskScore"] == 20
        assert data["source"] == "test"

        default = await client.post("/alerts/test")
        assert default.json()["type"] == "fraud"


class TestSettingsEndpoints:
    """/settings endpoints."""

    @pytest.mark.asyncio
    async def test_get_defaults(self, client):
        data = (await client.get("/settings")).json()
        assert data["thresholds"]["impossibleTravelRatio"] == 0.3
        assert data["notifications"]["autoRefreshInterval"] == 30

    @pytest.mark.asyncio
    async def test_update_thresholds(self, client):
        resp = await client.patch("/settings/thresholds", json={"maxHumanSpeedKmh": 30})

        assert resp.status_code == 200, resp.text
        assert resp.json()["maxHumanSpeedKmh"] == 30
        assert (await client.get("/settings")).json()["thresholds"]["maxHumanSpeedKmh"] == 30

    @pytest.mark.asyncio
    async def test_out_of_range_threshold_is_rejected(self, client):
        resp = await client.patch("/settings/thresholds", json={"impossibleTravelRatio": 0.9})

        assert resp.status_code == 422
        settings = (await client.get("/settings")).json()
        assert settings["thresholds"]["impossibleTravelRatio"] == 0.3

    @pytest.mark.asyncio
    async def test_cross_field_rule_is_rejected(self, client):
        resp = await client.patch(
            "/settings/thresholds",
            json={"mediumRiskScoreThreshold": 70, "highRiskScoreThreshold": 65},
        )

        assert resp.status_code == 422
        assert resp.json()["errors"]

    @pytest.mark.asyncio
    async def test_unknown_field_is_rejected(self, client):
        resp = await client.patch("/settings/thresholds", json={"walkingSpeed": 10})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_notification_toggle_affects_alerts(self, client):
        resp = await client.patch("/settings/notifications", json={"alertOnSuspicious": False})
        assert resp.status_code == 200
        assert resp.json()["alertOnSuspicious"] is False

        await client.post("/refresh")

        alerts = (await client.get("/alerts")).json()["alerts"]
        assert [alert["type"] for alert in alerts] == ["fraud"]

    @pytest.mark.asyncio
    async def test_reset(self, client):
        await client.patch("/settings/thresholds", json={"maxHumanSpeedKmh": 30})

        resp = await client.post("/settings/reset")

        assert resp.json()["thresholds"]["maxHumanSpeedKmh"] == 25
