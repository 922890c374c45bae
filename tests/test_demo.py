# tests/test_demo.py
import json

import pytest
from PIL import Image

from photo_tagger import demo
from photo_tagger.color import PhotoColor
from photo_tagger.tagging import UploadResult
from photo_tagger.tagging import config as cfg
from photo_tagger.tagging import workflow as workflow_impl


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "cat.png"
    Image.new("RGB", (16, 16), (10, 20, 30)).save(path, format="PNG")
    return path


@pytest.fixture
def fake_upload(monkeypatch):
    """Replace start_upload with a canned run that reports two progress steps."""
    calls = []

    def _fake_start_upload(payload, on_progress=None, on_complete=None, **kwargs):
        calls.append((payload, kwargs))
        on_progress(0.5)
        on_progress(1.0)
        return UploadResult(tags=["cat", "grass"], colors=[PhotoColor(10, 20, 30, "forest")])

    monkeypatch.setattr(workflow_impl, "start_upload", _fake_start_upload)
    monkeypatch.setattr("photo_tagger.tagging.start_upload", _fake_start_upload)
    monkeypatch.setenv(cfg.ENV_AUTHORIZATION, "Basic test")
    return calls


def test_demo_prints_tags_and_colors(image, fake_upload, capsys):
    demo.main([str(image)])
    out, err = capsys.readouterr()

    assert "cat" in out and "grass" in out
    assert "forest" in out and "#0a141e" in out
    assert "50.0%" in err and "100.0%" in err

    payload, kwargs = fake_upload[0]
    assert payload.filename == "image.jpg"
    assert payload.mime_type == "image/jpeg"
    assert payload.data[:3] == b"\xff\xd8\xff"
    assert kwargs["config"].authorization == "Basic test"


def test_demo_json_output(image, fake_upload, capsys):
    demo.main([str(image), "--json"])
    out, _ = capsys.readouterr()
    data = json.loads(out)
    assert data["tags"] == ["cat", "grass"]
    assert data["colors"][0]["color_name"] == "forest"


def test_demo_missing_file_exits(tmp_path, fake_upload, capsys):
    with pytest.raises(SystemExit) as exc:
        demo.main([str(tmp_path / "missing.jpg")])
    assert exc.value.code == 1
    assert "Error" in capsys.readouterr().err
    assert fake_upload == []


def test_demo_missing_credentials_exits(image, monkeypatch, capsys):
    for var in (cfg.ENV_AUTHORIZATION, cfg.ENV_API_KEY, cfg.ENV_API_SECRET):
        monkeypatch.delenv(var, raising=False)
    with pytest.raises(SystemExit) as exc:
        demo.main([str(image)])
    assert exc.value.code == 1
    assert cfg.ENV_AUTHORIZATION in capsys.readouterr().err
