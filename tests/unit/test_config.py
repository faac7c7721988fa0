import json
import pytest
from doc_sidebar.services import config
from doc_sidebar.utils.errors import ConfigNotFoundError, MissingFieldError, ValidationError
from doc_sidebar.utils.typing import RenderConfig

def test_config_dir_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("DOC_SIDEBAR_CONFIG_DIR", str(tmp_path))
    assert config.config_path() == tmp_path / "sidebar.json"

def test_save_then_load(tmp_path, monkeypatch):
    monkeypatch.setenv("DOC_SIDEBAR_CONFIG_DIR", str(tmp_path))
    cfg = RenderConfig(base="CDF", host="pds.example.org", path="tools", package="cdf", version="2.0")
    path = config.save_config(cfg)
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8"))["host"] == "pds.example.org"
    assert config.load_config() == cfg

def test_load_explicit_path(tmp_path):
    p = tmp_path / "custom.json"
    config.save_config(config.DEFAULT_CONFIG, p)
    assert config.load_config(p) == config.DEFAULT_CONFIG

def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigNotFoundError):
        config.load_config(tmp_path / "nope.json")

def test_load_missing_fields(tmp_path):
    p = tmp_path / "partial.json"
    p.write_text(json.dumps({"base": "CDF", "host": "h"}), encoding="utf-8")
    with pytest.raises(MissingFieldError) as exc:
        config.load_config(p)
    assert exc.value.fields == ("path", "package", "version")

def test_load_rejects_non_object(tmp_path):
    p = tmp_path / "list.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValidationError):
        config.load_config(p)

def test_load_json_null_is_not_reported_missing(tmp_path):
    p = tmp_path / "null.json"
    p.write_text("null", encoding="utf-8")
    with pytest.raises(ValidationError) as exc:
        config.load_config(p)
    assert not isinstance(exc.value, ConfigNotFoundError)

def test_log_dir_follows_config_dir(tmp_path, monkeypatch):
    from doc_sidebar.utils import logging as app_logging
    monkeypatch.setenv("DOC_SIDEBAR_CONFIG_DIR", str(tmp_path))
    monkeypatch.setattr(app_logging.logger, "handlers", [])
    app_logging.init()
    try:
        assert list((tmp_path / "logs").glob("doc_sidebar_*.log"))
    finally:
        for h in app_logging.logger.handlers:
            h.close()
