"""Tests for summary / policy rendering and the optional sub-sections."""

from __future__ import annotations

import textwrap

import pytest

from software_security_policy import renderer
from software_security_policy.errors import TemplateNotFoundError
from software_security_policy.policy import PolicyAttributes


def _policy(**kwargs: object) -> PolicyAttributes:
    kwargs.setdefault("maintainer", "a@b.com")
    return PolicyAttributes(**kwargs)


# ── Perl support sub-section ─────────────────────────────────────────────────


class TestPerlSupportedVersionSection:
    def test_empty_without_perl_options(self) -> None:
        assert renderer.perl_supported_version_section(_policy(program="Foo")) == ""

    def test_minimum_version(self) -> None:
        policy = _policy(program="Foo", minimum_perl_version="5.20")
        expected = textwrap.dedent("""\

            Note that the Foo project only supports major versions of Perl since
            5.20, even though Foo will run on
            older versions of Perl. If a security fix requires us to increase
            the minimum version of Perl that is supported, then we may do so.
        """)
        assert renderer.perl_supported_version_section(policy) == expected

    def test_support_years(self) -> None:
        policy = _policy(program="Foo", perl_support_years=10)
        expected = textwrap.dedent("""\

            Note that the Foo project only supports major versions of Perl
            released in the past 10 years, even though Foo will run on
            older versions of Perl.  If a security fix requires us to increase
            the minimum version of Perl that is supported, then we may do so.
        """)
        assert renderer.perl_supported_version_section(policy) == expected

    def test_minimum_version_wins(self) -> None:
        policy = _policy(program="Foo", minimum_perl_version="5.20", perl_support_years=10)
        section = renderer.perl_supported_version_section(policy)
        assert "since\n5.20" in section
        assert "released in the past" not in section

    def test_zero_years_omits_section(self) -> None:
        assert renderer.perl_supported_version_section(_policy(perl_support_years=0)) == ""

    def test_uses_default_program_name(self) -> None:
        section = renderer.perl_supported_version_section(_policy(perl_support_years=5))
        assert "Note that the this program project" in section


# ── Latest policy location sub-section ───────────────────────────────────────


class TestLatestPolicyLocation:
    def test_empty_without_urls(self) -> None:
        assert renderer.latest_policy_location(_policy(program="Foo")) == ""

    def test_git_url(self) -> None:
        policy = _policy(program="Foo", git_url="https://example.com/repo")
        assert renderer.latest_policy_location(policy) == (
            "\n"
            "The latest version of the Security Policy can be found in the\n"
            "[git repository for Foo](https://example.com/repo).\n"
        )

    def test_falls_back_to_url(self) -> None:
        policy = _policy(program="Foo", url="https://example.com/SECURITY.md")
        assert "(https://example.com/SECURITY.md)" in renderer.latest_policy_location(policy)


# ── Summary ──────────────────────────────────────────────────────────────────


class TestSummary:
    def test_exact_text(self) -> None:
        policy = _policy(program="Foo")
        assert policy.summary() == (
            "# Security Policy for the Foo distribution.\n"
            "\n"
            "Report issues via email at: a@b.com.\n"
            "\n"
        )

    def test_default_program(self) -> None:
        assert _policy().summary().startswith(
            "# Security Policy for the this program distribution.\n"
        )


# ── Security policy ──────────────────────────────────────────────────────────


class TestSecurityPolicy:
    def test_concrete_scenario(self) -> None:
        policy = _policy(
            program="Foo",
            timeframe="7 days",
            git_url="https://example.com/repo",
        )
        text = policy.security_policy()
        assert "This is the Security Policy for Foo." in text
        assert "[git repository for Foo](https://example.com/repo)" in text
        assert "within 7 days" in text
        assert "project maintainers at a@b.com." in text

    def test_opening_without_optional_sections(self) -> None:
        text = _policy(program="Foo").security_policy()
        assert text.startswith(
            "This is the Security Policy for Foo.\n"
            "\n"
            "This text is based on the CPAN Security Group's Guidelines for Adding\n"
        )
        assert "git repository for" not in text
        assert "Note that the" not in text

    def test_supported_versions_section_placement(self) -> None:
        text = _policy(program="Foo", perl_support_years=10).security_policy()
        assert (
            "the latest version of Foo.\n"
            "\n"
            "Note that the Foo project only supports major versions of Perl\n"
        ) in text
        assert "then we may do so.\n\n# Installation and Usage Issues" in text

    def test_default_timeframe(self) -> None:
        assert "within 5 days, then" in _policy().security_policy()

    def test_no_placeholders_left(self) -> None:
        text = _policy(program="Foo", minimum_perl_version="5.20", url="https://x").full_text()
        assert "{{" not in text
        assert "}}" not in text

    def test_ends_with_usage_section(self) -> None:
        text = _policy().security_policy()
        assert text.endswith(
            "## Usage\n\nPlease see the software documentation for further information.\n"
        )


# ── Full text ────────────────────────────────────────────────────────────────


class TestFullText:
    def test_is_summary_newline_policy(self) -> None:
        policy = _policy(program="Foo", perl_support_years=10, git_url="https://x")
        assert policy.full_text() == policy.summary() + "\n" + policy.security_policy()

    def test_idempotent(self) -> None:
        policy = _policy(program="Foo", minimum_perl_version="5.20")
        assert policy.full_text() == policy.full_text()

    def test_module_functions_match_methods(self) -> None:
        policy = _policy(program="Foo")
        assert renderer.full_text(policy) == policy.full_text()


class TestMissingTemplate:
    def test_unknown_variant(self) -> None:
        policy = _policy(variant="individual_2_0")
        with pytest.raises(TemplateNotFoundError, match="couldn't build SUMMARY section"):
            policy.summary()
