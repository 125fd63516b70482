"""Exception hierarchy for ``software_security_policy``."""

from __future__ import annotations


class SecurityPolicyError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SecurityPolicyError):
    """Policy attributes are missing, malformed or unreadable."""


class TemplateError(SecurityPolicyError):
    """A template references a placeholder that has no value."""


class TemplateNotFoundError(TemplateError):
    """A named template section is not shipped with the package."""

    def __init__(self, section: str) -> None:
        super().__init__(f"couldn't build {section} section")
        self.section = section
