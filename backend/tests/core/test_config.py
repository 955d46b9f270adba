from chartboard_backend.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("API_PREFIX", "ALLOWED_ORIGINS", "SEED_SAMPLE_CHART"):
        monkeypatch.delenv(name, raising=False)
    cfg = Settings(_env_file=None)  # type: ignore[call-arg]
    assert cfg.api_prefix == "/api"
    assert cfg.allowed_origins == ["http://localhost:5173"]
    assert cfg.seed_sample_chart is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "charts-api/")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, ,http://b.test")
    monkeypatch.setenv("SEED_SAMPLE_CHART", "false")
    cfg = Settings(_env_file=None)  # type: ignore[call-arg]
    assert cfg.api_prefix == "/charts-api"
    assert cfg.allowed_origins == ["http://a.test", "http://b.test"]
    assert cfg.seed_sample_chart is False
