"""Software Security Policy – boilerplate SECURITY.md generator.

Provides the ``secpolicy`` CLI plus helpers to render the CPAN Security
Group style Security Policy for a software distribution.

The importable package is ``software_security_policy``; the PyPI
distribution name is ``software-security-policy``.
"""

from software_security_policy.errors import (
    ConfigurationError,
    SecurityPolicyError,
    TemplateError,
    TemplateNotFoundError,
)
from software_security_policy.policy import PolicyAttributes

__all__ = [
    "ConfigurationError",
    "PolicyAttributes",
    "SecurityPolicyError",
    "TemplateError",
    "TemplateNotFoundError",
]
