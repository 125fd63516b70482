"""Policy attributes and their defaulting rules.

A ``PolicyAttributes`` instance holds the options a caller supplied for one
distribution.  Options are stored verbatim; the accessor methods apply the
fallback rules when a value is read.

    >>> policy = PolicyAttributes(maintainer="Jane <jane@example.org>", program="Foo")
    >>> policy.Program()
    'Foo'
    >>> policy.timeframe()
    '5 days'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from software_security_policy import renderer
from software_security_policy.errors import ConfigurationError

# ── Constants ────────────────────────────────────────────────────────────────

DEFAULT_VARIANT = "individual"

ATTRIBUTE_KEYS = (
    "maintainer",
    "program",
    "Program",
    "timeframe",
    "timeframe_quantity",
    "timeframe_units",
    "url",
    "git_url",
    "perl_support_years",
    "minimum_perl_version",
)

DEFAULT_PROGRAM = "this program"
DEFAULT_PROGRAM_CAPITALIZED = "This program"
DEFAULT_TIMEFRAME = "5 days"


# ── Attributes ───────────────────────────────────────────────────────────────


@dataclass(frozen=True, init=False)
class PolicyAttributes:
    """Immutable set of options for one policy variant.

    Options may be given as a mapping, as keyword arguments, or both
    (keywords win).  ``maintainer`` is required; everything else is
    optional and defaulted by the accessors.

    Raises
    ------
    ConfigurationError
        If ``maintainer`` is missing or empty.  Other options are stored
        as given; ``config.check_keys`` rejects unknown ones from files.
    """

    options: Mapping[str, object] = field(hash=False)
    variant: str = DEFAULT_VARIANT

    def __init__(
        self,
        options: Mapping[str, object] | None = None,
        *,
        variant: str = DEFAULT_VARIANT,
        **kwargs: object,
    ) -> None:
        merged = {**(options or {}), **kwargs}

        if not merged.get("maintainer"):
            raise ConfigurationError("no maintainer is specified")

        object.__setattr__(self, "options", MappingProxyType(merged))
        object.__setattr__(self, "variant", variant)

    def _get(self, key: str) -> object | None:
        return self.options.get(key)

    # ── Identity ─────────────────────────────────────────────────────────

    def name(self) -> str:
        """Identifier of the policy variant, e.g. ``"individual"``."""
        return self.variant

    def version(self) -> str | None:
        """Version baked into the variant identifier, if any.

        ``"individual_2_0"`` reports ``"2.0"``; an identifier without
        underscore-separated parts is unversioned and reports ``None``.
        """
        _, *parts = self.name().split("_")
        if not parts:
            return None
        return ".".join(parts)

    # ── Attribute readers ────────────────────────────────────────────────

    def maintainer(self) -> str:
        return str(self.options["maintainer"])

    def dotless_maintainer(self) -> str:
        """``maintainer()`` without a trailing period, for use mid-sentence."""
        maintainer = self.maintainer()
        if maintainer.endswith("."):
            return maintainer[:-1]
        return maintainer

    def program(self) -> str:
        """Name of the software for use in the middle of a sentence.

        Empty or zero values count as not given.
        """
        return self._get("program") or self._get("Program") or DEFAULT_PROGRAM

    def Program(self) -> str:
        """Name of the software for use at the beginning of a sentence."""
        return self._get("Program") or self._get("program") or DEFAULT_PROGRAM_CAPITALIZED

    def timeframe(self) -> str:
        """Expected time to acknowledge a report."""
        timeframe = self._get("timeframe")
        if timeframe is not None:
            return timeframe
        quantity = self._get("timeframe_quantity")
        units = self._get("timeframe_units")
        if quantity is not None and units is not None:
            return f"{quantity} {units}"
        return DEFAULT_TIMEFRAME

    def url(self) -> str | None:
        """URL of the latest policy text; falls back to ``git_url``."""
        url = self._get("url")
        return url if url is not None else self._get("git_url")

    def git_url(self) -> str | None:
        """Git URL of the latest policy text; falls back to ``url``."""
        git_url = self._get("git_url")
        return git_url if git_url is not None else self._get("url")

    def perl_support_years(self) -> int | str | None:
        return self._get("perl_support_years")

    def minimum_perl_version(self) -> str | None:
        return self._get("minimum_perl_version")

    # ── Rendering ────────────────────────────────────────────────────────

    def summary(self) -> str:
        return renderer.summary(self)

    def security_policy(self) -> str:
        return renderer.security_policy(self)

    def full_text(self) -> str:
        return renderer.full_text(self)

    def as_dict(self) -> dict[str, object]:
        """Return the supplied options in ``ATTRIBUTE_KEYS`` order."""
        return {key: self.options[key] for key in ATTRIBUTE_KEYS if key in self.options}
