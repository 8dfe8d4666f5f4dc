"""Metrics — /metrics exposes Prometheus counters for traffic and ingestion."""

from prometheus_client import REGISTRY


def _sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


async def test_metrics_exposes_prometheus_text(client):
    await client.get("/health")
    res = await client.get("/metrics")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")
    assert "http_requests_total" in res.text
    assert "readings_ingested_total" in res.text


async def test_successful_post_increments_ingested_counter(client):
    before = _sample("readings_ingested_total")
    await client.post(
        "/data", json={"tempCo": 1.0, "tempRoom": 1.0},
        headers={"X-Secret-Key": "testsecret"},
    )
    assert _sample("readings_ingested_total") == before + 1


async def test_rejected_post_does_not_increment_ingested_counter(client):
    before = _sample("readings_ingested_total")
    await client.post("/data", json={"tempCo": 1.0, "tempRoom": 1.0})
    assert _sample("readings_ingested_total") == before
