from chat_gateway.config.settings import Settings


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GATEWAY_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    s = Settings()
    assert s.http_timeout == 60.0
    assert s.ollama_base_url == "http://localhost:11434"
    assert s.ollama_cloud_base_url == "https://ollama.com"


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GATEWAY_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("GATEWAY_OLLAMA_BASE_URL", "http://gpu-box:11434/")
    s = Settings()
    assert s.http_timeout == 5.0
    assert s.ollama_base_url == "http://gpu-box:11434"


def test_settings_from_yaml(monkeypatch, tmp_path):
    cfg = tmp_path / "gateway.yaml"
    cfg.write_text("http_timeout: 12\nport: 9001\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GATEWAY_CONFIG_FILE", str(cfg))
    s = Settings()
    assert s.http_timeout == 12.0
    assert s.port == 9001
