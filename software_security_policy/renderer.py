"""Render Security Policy text from policy attributes.

Responsibilities
----------------
* Compute the two optional sub-sections (Perl support window and the
  location of the latest policy text).
* Build the substitution context for a policy.
* Fill in the ``SUMMARY`` and ``SECURITY-POLICY`` templates.

Every function here is pure: output depends only on the policy passed in.
"""

from __future__ import annotations

from typing import Protocol

from software_security_policy.template import render

# ── Section names ────────────────────────────────────────────────────────────

SUMMARY_SECTION = "SUMMARY"
SECURITY_POLICY_SECTION = "SECURITY-POLICY"


# ── Variant interface ────────────────────────────────────────────────────────


class PolicyVariant(Protocol):
    """What the renderer needs from a policy."""

    def name(self) -> str: ...

    def version(self) -> str | None: ...

    def maintainer(self) -> str: ...

    def dotless_maintainer(self) -> str: ...

    def program(self) -> str: ...

    def Program(self) -> str: ...

    def timeframe(self) -> str: ...

    def git_url(self) -> str | None: ...

    def perl_support_years(self) -> int | str | None: ...

    def minimum_perl_version(self) -> str | None: ...


# ── Sub-sections ─────────────────────────────────────────────────────────────


def perl_supported_version_section(policy: PolicyVariant) -> str:
    """Return the Perl support paragraph, or ``""`` when nothing is configured.

    ``minimum_perl_version`` takes precedence over ``perl_support_years``.
    """
    program = policy.program()
    minimum_perl_version = policy.minimum_perl_version()
    if minimum_perl_version:
        return (
            "\n"
            f"Note that the {program} project only supports major versions of Perl since\n"
            f"{minimum_perl_version}, even though {program} will run on\n"
            "older versions of Perl. If a security fix requires us to increase\n"
            "the minimum version of Perl that is supported, then we may do so.\n"
        )
    perl_support_years = policy.perl_support_years()
    if perl_support_years:
        return (
            "\n"
            f"Note that the {program} project only supports major versions of Perl\n"
            f"released in the past {perl_support_years} years, even though {program} will run on\n"
            "older versions of Perl.  If a security fix requires us to increase\n"
            "the minimum version of Perl that is supported, then we may do so.\n"
        )
    return ""


def latest_policy_location(policy: PolicyVariant) -> str:
    """Return the paragraph linking to the canonical policy, or ``""``."""
    git_url = policy.git_url()
    if git_url is None:
        return ""
    return (
        "\n"
        "The latest version of the Security Policy can be found in the\n"
        f"[git repository for {policy.program()}]({git_url}).\n"
    )


# ── Rendering ────────────────────────────────────────────────────────────────


def build_context(policy: PolicyVariant) -> dict[str, object]:
    """Return the placeholder values available to every template."""
    return {
        "program": policy.program(),
        "Program": policy.Program(),
        "maintainer": policy.maintainer(),
        "dotless_maintainer": policy.dotless_maintainer(),
        "timeframe": policy.timeframe(),
        "latest_policy_location": latest_policy_location(policy),
        "perl_supported_version_section": perl_supported_version_section(policy),
    }


def _fill_in(policy: PolicyVariant, section: str) -> str:
    return render(policy.name(), section, build_context(policy))


def summary(policy: PolicyVariant) -> str:
    """Return the short summary: program header plus reporting contact."""
    return _fill_in(policy, SUMMARY_SECTION)


def security_policy(policy: PolicyVariant) -> str:
    """Return the full policy document body."""
    return _fill_in(policy, SECURITY_POLICY_SECTION)


def full_text(policy: PolicyVariant) -> str:
    """Return ``summary`` and ``security_policy`` joined by a newline."""
    return "\n".join((summary(policy), security_policy(policy)))
