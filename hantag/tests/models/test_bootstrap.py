import threading
import zipfile

import pytest

from hantag.models import bootstrap
from hantag.models.bootstrap import *
from hantag.errors import *

def make_archive(path, files=None):
    files = files or {"conf/plugin/MajorPlugin/MorphAnalyzer/ChartMorphAnalyzer.json": "{}",
                      "data/kE/dic_system.txt": "밥\tncn\n"}
    with zipfile.ZipFile(path, 'w') as zf:
        zf.writestr("conf/", "")
        zf.writestr("data/empty/", "")
        for name, content in files.items():
            zf.writestr(name, content)
    return path

@pytest.fixture
def no_bundle(monkeypatch, tmp_path):
    monkeypatch.setattr(bootstrap, "BUNDLED_ARCHIVE", tmp_path / "bundle" / "models.zip")
    monkeypatch.chdir(tmp_path)

def test_extracts(tmp_path, no_bundle):
    archive = make_archive(tmp_path / "custom.zip")
    root = tmp_path / "root"

    result = ensure_resources_extracted(root=root, archive=archive)

    assert result.ok
    assert result.status == BootstrapStatus.EXTRACTED
    assert result.entries == 2
    assert result.archive == str(archive)
    assert (root / "conf" / "plugin" / "MajorPlugin" / "MorphAnalyzer" / "ChartMorphAnalyzer.json").read_text() == "{}"
    assert (root / "data" / "kE" / "dic_system.txt").read_text(encoding="utf-8") == "밥\tncn\n"
    assert (root / "data" / "empty").is_dir()

def test_idempotent(tmp_path, no_bundle, monkeypatch):
    archive = make_archive(tmp_path / "custom.zip")
    root = tmp_path / "root"

    first = ensure_resources_extracted(root=root, archive=archive)
    target = root / "data" / "kE" / "dic_system.txt"
    target.unlink()

    calls = []
    monkeypatch.setattr(bootstrap, "_extract", lambda *a: calls.append(a))
    for _ in range(3):
        assert ensure_resources_extracted(root=root, archive=archive) is first

    assert calls == []
    assert not target.exists()

def test_working_directory_preferred(tmp_path, monkeypatch):
    bundled = make_archive(tmp_path / "bundled.zip", {"from_bundle.txt": "b"})
    make_archive(tmp_path / "models.zip", {"from_cwd.txt": "c"})
    monkeypatch.setattr(bootstrap, "BUNDLED_ARCHIVE", bundled)
    monkeypatch.chdir(tmp_path)

    result = ensure_resources_extracted(root=tmp_path / "root")

    assert (tmp_path / "root" / "from_cwd.txt").exists()
    assert not (tmp_path / "root" / "from_bundle.txt").exists()
    assert result.archive == str(tmp_path / "models.zip")

def test_bundled_fallback(tmp_path, monkeypatch):
    (tmp_path / "cwd").mkdir()
    bundled = make_archive(tmp_path / "bundled.zip", {"from_bundle.txt": "b"})
    monkeypatch.setattr(bootstrap, "BUNDLED_ARCHIVE", bundled)
    monkeypatch.chdir(tmp_path / "cwd")

    result = ensure_resources_extracted(root=tmp_path / "root")

    assert result.ok
    assert (tmp_path / "root" / "from_bundle.txt").exists()

def test_missing_archive_degrades(tmp_path, no_bundle):
    result = ensure_resources_extracted(root=tmp_path / "root")

    assert not result.ok
    assert result.status == BootstrapStatus.DEGRADED
    assert result.archive is None
    assert "models.zip" in result.error

def test_bad_archive_degrades(tmp_path, no_bundle):
    archive = tmp_path / "broken.zip"
    archive.write_bytes(b"definitely not a zip")

    result = ensure_resources_extracted(root=tmp_path / "root", archive=archive)

    assert result.status == BootstrapStatus.DEGRADED
    assert result.archive == str(archive)

def test_strict(tmp_path, no_bundle):
    with pytest.raises(BootstrapError):
        ensure_resources_extracted(root=tmp_path / "root", strict=True)

def test_skips_escaping_entries(tmp_path, no_bundle):
    archive = make_archive(tmp_path / "evil.zip", {"../evil.txt": "x", "fine.txt": "y"})

    result = ensure_resources_extracted(root=tmp_path / "root", archive=archive)

    assert result.entries == 1
    assert not (tmp_path / "evil.txt").exists()
    assert (tmp_path / "root" / "fine.txt").exists()

def test_root_from_config(tmp_path, no_bundle, settings):
    settings["resources"]["root"] = str(tmp_path / "configured")
    archive = make_archive(tmp_path / "custom.zip")

    result = ensure_resources_extracted(archive=archive, config=settings)

    assert result.root == str(tmp_path / "configured")
    assert (tmp_path / "configured" / "conf").is_dir()

def test_archive_from_config(tmp_path, no_bundle, settings):
    settings["resources"]["archive"] = str(make_archive(tmp_path / "configured.zip"))

    assert locate_archive(config=settings) == tmp_path / "configured.zip"

def test_concurrent_calls_extract_once(tmp_path, no_bundle, monkeypatch):
    archive = make_archive(tmp_path / "custom.zip")
    real = bootstrap._extract
    calls = []

    def counting(*args):
        calls.append(args)
        return real(*args)
    monkeypatch.setattr(bootstrap, "_extract", counting)

    results = []
    threads = [threading.Thread(target=lambda: results.append(
        ensure_resources_extracted(root=tmp_path / "root", archive=archive)))
               for _ in range(8)]
    for i in threads:
        i.start()
    for i in threads:
        i.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(i is results[0] for i in results)

def test_reset(tmp_path, no_bundle):
    archive = make_archive(tmp_path / "custom.zip")

    first = ensure_resources_extracted(root=tmp_path / "root", archive=archive)
    reset_bootstrap()
    second = ensure_resources_extracted(root=tmp_path / "root", archive=archive)

    assert second is not first
    assert second.ok
