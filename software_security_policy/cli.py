"""Command-line interface for the Security Policy generator (``secpolicy``).

Usage examples::

    secpolicy render --maintainer "Jane <jane@example.org>" --program Foo::Bar
    secpolicy render --config policy.yaml --output SECURITY.md
    secpolicy summary --config policy.yaml
    secpolicy show-config --config policy.yaml --timeframe "2 weeks"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from software_security_policy._version import __version__
from software_security_policy.config import dump_config, load_policy
from software_security_policy.errors import SecurityPolicyError
from software_security_policy.policy import ATTRIBUTE_KEYS, PolicyAttributes

# ── Helpers ──────────────────────────────────────────────────────────────────


def _policy_from_args(args: argparse.Namespace) -> PolicyAttributes:
    overrides = {key: getattr(args, key) for key in ATTRIBUTE_KEYS}
    return load_policy(args.config, overrides=overrides)


def _emit(text: str, output: Path | None, force: bool) -> int:
    """Write *text* to *output*, or to stdout when no output is given."""
    if output is None:
        sys.stdout.write(text)
        return 0

    if output.exists() and not force:
        print(f"ERROR: {output} already exists (use --force to overwrite).", file=sys.stderr)
        return 1

    try:
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        print(f"ERROR: Cannot write {output}: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {output}")
    return 0


# ── Subcommand handlers ─────────────────────────────────────────────────────


def _handle_render(args: argparse.Namespace) -> int:
    """Render the full Security Policy."""
    policy = _policy_from_args(args)
    return _emit(policy.full_text(), args.output, args.force)


def _handle_summary(args: argparse.Namespace) -> int:
    """Render only the summary block."""
    policy = _policy_from_args(args)
    return _emit(policy.summary(), args.output, args.force)


def _handle_show_config(args: argparse.Namespace) -> int:
    """Print the resolved policy attributes as YAML."""
    policy = _policy_from_args(args)
    sys.stdout.write(dump_config(policy))
    return 0


# ── Argument parser ─────────────────────────────────────────────────────────


def _attribute_parser() -> argparse.ArgumentParser:
    """Options shared by every subcommand."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with policy attributes",
    )

    attrs = parser.add_argument_group("policy attributes (override --config)")
    attrs.add_argument("--maintainer", help='Security contact, e.g. "Jane <jane@example.org>"')
    attrs.add_argument("--program", help="Name of the software, mid-sentence form")
    attrs.add_argument("--Program", dest="Program", help="Name of the software, sentence-start form")
    attrs.add_argument("--timeframe", help='Expected acknowledgement time (default: "5 days")')
    attrs.add_argument(
        "--timeframe-quantity",
        dest="timeframe_quantity",
        help="Acknowledgement time amount, used with --timeframe-units",
    )
    attrs.add_argument(
        "--timeframe-units",
        dest="timeframe_units",
        help="Acknowledgement time units, used with --timeframe-quantity",
    )
    attrs.add_argument("--url", help="URL of the latest policy text")
    attrs.add_argument("--git-url", dest="git_url", help="Git URL of the latest policy text")
    attrs.add_argument(
        "--perl-support-years",
        dest="perl_support_years",
        type=int,
        help="Years of past major Perl releases that are supported",
    )
    attrs.add_argument(
        "--minimum-perl-version",
        dest="minimum_perl_version",
        help="Oldest supported major Perl version, e.g. 5.20",
    )
    return parser


def _output_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Overwrite --output if it already exists",
    )
    return parser


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secpolicy",
        description=f"Security Policy generator (v{__version__})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    attributes = _attribute_parser()
    output = _output_parser()

    # ── secpolicy render ─────────────────────────────────────────────────
    render_parser = subparsers.add_parser(
        "render",
        parents=[attributes, output],
        help="Render the full Security Policy (summary and policy text)",
    )
    render_parser.set_defaults(func=_handle_render)

    # ── secpolicy summary ────────────────────────────────────────────────
    summary_parser = subparsers.add_parser(
        "summary",
        parents=[attributes, output],
        help="Render only the summary block",
    )
    summary_parser.set_defaults(func=_handle_summary)

    # ── secpolicy show-config ────────────────────────────────────────────
    show_parser = subparsers.add_parser(
        "show-config",
        parents=[attributes],
        help="Print the resolved policy attributes as YAML",
    )
    show_parser.set_defaults(func=_handle_show_config)

    return parser


# ── Entrypoint ───────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint (installed as ``secpolicy``)."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        exit_code = args.func(args)
    except SecurityPolicyError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
