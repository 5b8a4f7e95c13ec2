"""
bootstrap.py
One-time extraction of the bundled model archive into the resource root.

Extraction runs at most once per process. The first call to
`ensure_resources_extracted` does the work under a lock, and every later call
returns the first call's result without touching the disk. Failures degrade
rather than raise (unless `strict`). A stage whose files are really missing
will then fail at build time with a StageConfigurationError naming it.
"""

import os
import shutil
import threading
import zipfile
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from filelock import FileLock
from platformdirs import user_data_dir
from pydantic import BaseModel, Field

from hantag.constants import ARCHIVE_NAME
from hantag.errors import *

L = logging.getLogger("hantag")

BUNDLED_ARCHIVE = Path(__file__).parent.parent / "resources" / ARCHIVE_NAME

class BootstrapStatus(str, Enum):
    EXTRACTED = "extracted"
    DEGRADED = "degraded" # resources assumed present

class BootstrapResult(BaseModel):
    status: BootstrapStatus
    root: str
    archive: Optional[str] = Field(default=None)
    entries: int = Field(default=0)
    error: Optional[str] = Field(default=None)

    @property
    def ok(self):
        return self.status == BootstrapStatus.EXTRACTED

class _BootstrapState:
    """Process-wide extraction state.

    `result` is None until the first extraction attempt finishes; the
    lock makes the check-and-set atomic across threads.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.result = None

    def reset(self):
        with self.lock:
            self.result = None

_STATE = _BootstrapState()

def default_root(config=None):
    """Resolve the directory resources are extracted into.

    Parameters
    ----------
    config : Optional[configparser.ConfigParser]
        Loaded configuration, if any.

    Returns
    -------
    Path
        The resource root.
    """
    
    if config is not None and config.get("resources", "root", fallback=None):
        return Path(config.get("resources", "root")).expanduser()
    return Path(user_data_dir("hantag"))

def locate_archive(archive=None, config=None):
    """Find the model archive, preferring the working directory copy.

    Returns
    -------
    Optional[Path]
        Path to the archive, or None if no candidate exists.
    """

    candidates = []
    if archive is not None:
        candidates.append(Path(archive))
    if config is not None and config.get("resources", "archive", fallback=None):
        candidates.append(Path(config.get("resources", "archive")).expanduser())
    candidates.append(Path.cwd() / ARCHIVE_NAME)
    candidates.append(BUNDLED_ARCHIVE)

    for i in candidates:
        if i.is_file():
            return i
    return None

def _extract(archive, root):
    root = root.resolve()
    count = 0

    with zipfile.ZipFile(archive) as zf:
        for entry in zf.infolist():
            target = (root / entry.filename).resolve()
            if os.path.commonpath([root, target]) != str(root):
                L.warning(f"Skipping archive entry outside of the resource root: '{entry.filename}'")
                continue

            if entry.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue

            target.parent.mkdir(parents=True, exist_ok=True)
            with zf.open(entry) as src, open(target, 'wb') as dest:
                shutil.copyfileobj(src, dest)
            count += 1

    return count

def ensure_resources_extracted(root=None, archive=None, config=None, strict=False):
    """Extract the model archive into the resource root, once per process.

    Parameters
    ----------
    root : Optional[str]
        Directory to extract into; defaults to the configured or
        platform data directory.
    archive : Optional[str]
        Explicit archive path, tried before the working directory
        and the bundled copy.
    config : Optional[configparser.ConfigParser]
        Loaded configuration, if any.
    strict : bool
        Raise BootstrapError instead of degrading when the first
        extraction fails.

    Returns
    -------
    BootstrapResult
        The outcome of the (only) extraction attempt.
    """

    with _STATE.lock:
        if _STATE.result is not None:
            L.debug(f"Resources already handled this process ({_STATE.result.status.value}), skipping.")
            return _STATE.result

        root = Path(root) if root is not None else default_root(config)
        found = locate_archive(archive, config)

        try:
            if found is None:
                raise BootstrapError(f"Cannot find model archive '{ARCHIVE_NAME}' in the working directory or the bundled resources.")

            L.info(f"Extracting model archive '{found}' to '{root}'...")
            root.mkdir(parents=True, exist_ok=True)
            # other processes may be extracting into the same root
            with FileLock(str(root / ".hantag.lock")):
                count = _extract(found, root)
            result = BootstrapResult(status=BootstrapStatus.EXTRACTED, root=str(root),
                                     archive=str(found), entries=count)
            L.debug(f"Extracted {count} files from '{found}'.")
        except (OSError, zipfile.BadZipFile, BootstrapError) as e:
            L.error(f"Model resource extraction failed, continuing with resources assumed present: {e}")
            result = BootstrapResult(status=BootstrapStatus.DEGRADED, root=str(root),
                                     archive=str(found) if found else None,
                                     error=str(e))

        _STATE.result = result

    if strict and not result.ok:
        raise BootstrapError(result.error)

    return result

def reset_bootstrap():
    """Forget the process-wide extraction result, so the next call extracts again."""

    _STATE.reset()
