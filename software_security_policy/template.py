"""Static template sections for the rendered Security Policy.

Each policy variant ships two named sections, ``SUMMARY`` and
``SECURITY-POLICY``.  Values are inserted through ``{{ name }}``
placeholders; there is no expression evaluation.

Part of the ``software_security_policy`` package
(PyPI: software-security-policy).
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from software_security_policy.errors import TemplateError, TemplateNotFoundError

SUMMARY = """\
# Security Policy for the {{ program }} distribution.

Report issues via email at: {{ maintainer }}.

"""

SECURITY_POLICY = """\
This is the Security Policy for {{ program }}.
{{ latest_policy_location }}
This text is based on the CPAN Security Group's Guidelines for Adding
a Security Policy to Perl Distributions (version 1.0.0)
https://security.metacpan.org/docs/guides/security-policy-for-authors.html

# How to Report a Security Vulnerability

Security vulnerabilities can be reported by e-mail to the current
project maintainers at {{ maintainer }}.

Please include as many details as possible, including code samples
or test cases, so that we can reproduce the issue.  Check that your
report does not expose any sensitive data, such as passwords,
tokens, or personal information.

If you would like any help with triaging the issue, or if the issue
is being actively exploited, please copy the report to the CPAN
Security Group (CPANSec) at <cpan-security@security.metacpan.org>.

Please *do not* use the public issue reporting system on RT or
GitHub issues for reporting security vulnerabilities.

Please do not disclose the security vulnerability in public forums
until past any proposed date for public disclosure, or it has been
made public by the maintainers or CPANSec.  That includes patches or
pull requests.

For more information, see
[Report a Security Issue](https://security.metacpan.org/docs/report.html)
on the CPANSec website.

## Response to Reports

The maintainer(s) aim to acknowledge your security report as soon as
possible.  However, this project is maintained by a single person in
their spare time, and they cannot guarantee a rapid response.  If you
have not received a response from them within {{ timeframe }}, then
please send a reminder to them and copy the report to CPANSec at
<cpan-security@security.metacpan.org>.

Please note that the initial response to your report will be an
acknowledgement, with a possible query for more information.  It
will not necessarily include any fixes for the issue.

The project maintainer(s) may forward this issue to the security
contacts for other projects where we believe it is relevant.  This
may include embedded libraries, system libraries, prerequisite
modules or downstream software that uses this software.

They may also forward this issue to CPANSec.

# Which Software This Policy Applies To

Any security vulnerabilities in {{ program }} are covered by this policy.

Security vulnerabilities are considered anything that allows users
to execute unauthorised code, access unauthorised resources, or to
have an adverse impact on accessibility or performance of a system.

Security vulnerabilities in upstream software (embedded libraries,
prerequisite modules or system libraries, or in Perl), are not
covered by this policy unless they affect {{ program }}, or {{ program }} can
be used to exploit vulnerabilities in them.

Security vulnerabilities in downstream software (any software that
uses {{ program }}, or plugins to it that are not included with the
{{ program }} distribution) are not covered by this policy.

## Supported Versions of {{ program }}

The maintainer(s) will only commit to releasing security fixes for
the latest version of {{ program }}.
{{ perl_supported_version_section }}
# Installation and Usage Issues

The distribution metadata specifies minimum versions of
prerequisites that are required for {{ program }} to work.  However, some
of these prerequisites may have security vulnerabilities, and you
should ensure that you are using up-to-date versions of these
prerequisites.

Where security vulnerabilities are known, the metadata may indicate
newer versions as recommended.

## Usage

Please see the software documentation for further information.
"""

# Variant identifier -> section name -> template body.
TEMPLATES: dict[str, dict[str, str]] = {
    "individual": {
        "SUMMARY": SUMMARY,
        "SECURITY-POLICY": SECURITY_POLICY,
    },
}

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def section_data(variant: str, section: str) -> str:
    """Return the raw template body for *section* of *variant*.

    Raises ``TemplateNotFoundError`` when the variant or the section is
    not shipped; that is a packaging defect, not a user error.
    """
    try:
        return TEMPLATES[variant][section]
    except KeyError:
        raise TemplateNotFoundError(section) from None


def fill_in(text: str, context: Mapping[str, object]) -> str:
    """Substitute every ``{{ name }}`` in *text* with ``context[name]``.

    ``None`` renders as an empty string.
    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in context:
            raise TemplateError(f"Unknown template placeholder: '{{{{ {key} }}}}'")
        value = context[key]
        return "" if value is None else str(value)

    return _PLACEHOLDER_RE.sub(_replace, text)


def render(variant: str, section: str, context: Mapping[str, object]) -> str:
    """Return *section* of *variant* with *context* substituted."""
    return fill_in(section_data(variant, section), context)
