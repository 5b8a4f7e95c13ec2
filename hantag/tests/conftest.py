import pytest

from hantag.models.bootstrap import reset_bootstrap
from hantag.pipelines.dispatch import DEFAULT_RESOURCES
from hantag.utils.config import config_read

@pytest.fixture(autouse=True)
def fresh_bootstrap():
    """Forget process-wide extraction state around every test."""

    reset_bootstrap()
    yield
    reset_bootstrap()

@pytest.fixture
def resource_root(tmp_path):
    """Resource root holding every default stage configuration file.

    Returns
    -------
    Path
        The resource root.
    """

    root = tmp_path / "resources"
    for resource in DEFAULT_RESOURCES.values():
        path = root / resource
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{}", encoding="utf-8")
    return root

@pytest.fixture
def settings(tmp_path):
    """Default settings, without reading the user's ~/.hantag.ini."""

    return config_read(path=tmp_path / "missing.ini")
