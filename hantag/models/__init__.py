from .bootstrap import (ensure_resources_extracted, reset_bootstrap, BootstrapResult,
                        BootstrapStatus, default_root, locate_archive)
