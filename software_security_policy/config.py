"""Load policy attributes from YAML configuration files.

A configuration file is a single YAML mapping whose keys are the policy
attributes, for example::

    maintainer: "Jane Doe <jane@example.org>"
    program: Foo::Bar
    timeframe: 7 days
    git_url: https://example.org/foo-bar
    perl_support_years: 10
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml

from software_security_policy.errors import ConfigurationError
from software_security_policy.policy import ATTRIBUTE_KEYS, DEFAULT_VARIANT, PolicyAttributes


def parse_config(text: str, source: str = "<string>") -> dict[str, object]:
    """Return the mapping held in the YAML document *text*.

    An empty document yields an empty mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"{source}: Invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{source}: Configuration must be a YAML mapping.")
    return data


def check_keys(options: Mapping[str, object], source: str = "<config>") -> None:
    """Raise ``ConfigurationError`` if *options* holds keys outside ``ATTRIBUTE_KEYS``."""
    unknown = sorted(set(options) - set(ATTRIBUTE_KEYS))
    if unknown:
        raise ConfigurationError(
            f"{source}: Unknown policy attribute(s): {', '.join(unknown)}"
        )


def read_config(path: str | Path) -> dict[str, object]:
    """Read and parse the YAML configuration file at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file: {exc}") from exc
    return parse_config(text, str(path))


def load_policy(
    path: str | Path | None = None,
    *,
    overrides: Mapping[str, object] | None = None,
    variant: str = DEFAULT_VARIANT,
) -> PolicyAttributes:
    """Build a ``PolicyAttributes`` from a config file plus *overrides*.

    Parameters
    ----------
    path : str | Path | None
        YAML configuration file; *None* means start from no options.
    overrides : mapping | None
        Values that replace those read from *path*.  Keys mapped to
        ``None`` are ignored so unset CLI flags do not mask file values.
    variant : str
        Policy variant identifier.
    """
    options = read_config(path) if path is not None else {}
    check_keys(options, str(path))
    if overrides:
        options.update({k: v for k, v in overrides.items() if v is not None})
    return PolicyAttributes(options, variant=variant)


def dump_config(policy: PolicyAttributes) -> str:
    """Return the supplied options of *policy* as a YAML document."""
    return yaml.safe_dump(policy.as_dict(), sort_keys=False, allow_unicode=True)
