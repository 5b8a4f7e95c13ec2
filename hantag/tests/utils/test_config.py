import pytest

from hantag.utils.config import *
from hantag.errors import *

def test_defaults_without_file(tmp_path):
    config = config_read(path=tmp_path / "missing.ini")

    assert config.has_section("resources")
    assert jvm_options(config) == (None, 1024)

def test_required(tmp_path):
    with pytest.raises(ConfigNotFoundError):
        config_read(required=True, path=tmp_path / "missing.ini")

def test_reads_file(tmp_path):
    path = tmp_path / "hantag.ini"
    path.write_text("[resources]\nroot = /srv/hantag\n\n[jvm]\npath = /opt/jvm/libjvm.so\nmax_heap_size = 4096\n")

    config = config_read(path=path)

    assert config["resources"]["root"] == "/srv/hantag"
    assert jvm_options(config) == ("/opt/jvm/libjvm.so", 4096)

def test_interactive_setup(tmp_path, monkeypatch):
    answers = iter([str(tmp_path / "res")])
    monkeypatch.setattr("hantag.utils.config.Prompt.ask", lambda *a, **k: next(answers))
    monkeypatch.setattr("hantag.utils.config.Confirm.ask", lambda *a, **k: False)

    path = tmp_path / "hantag.ini"
    config = config_read(interactive=True, path=path)

    assert config["resources"]["root"] == str(tmp_path / "res")
    assert config_read(path=path)["resources"]["root"] == str(tmp_path / "res")
