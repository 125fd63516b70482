"""Version helper – single source of truth via ``importlib.metadata``.

Usage::

    from software_security_policy._version import __version__
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("software-security-policy")
except PackageNotFoundError:  # pragma: no cover – source checkouts without install
    __version__ = "0.0.0-dev"
