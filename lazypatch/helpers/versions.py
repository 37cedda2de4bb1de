"""
Detecting the library's own version.

The codebase does not contain the version directly. It is taken from
the installed distribution's metadata once, when the code is loaded.
"""
from typing import Optional

version: Optional[str] = None

try:
    import importlib.metadata
except ImportError:
    pass
else:
    try:
        name, *_ = __name__.split('.')  # usually "lazypatch", unless renamed/forked.
        version = importlib.metadata.version(name)
    except Exception:
        pass  # not installed, e.g. running from a source checkout.
