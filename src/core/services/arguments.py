"""Parsing and validation of the raw CLI arguments.

The recognized options are a fixed set (``help``, ``url``, ``username``,
``query``, ``output``). Parsing never raises on bad input: every problem
found is collected as a message in ``Options.errors`` so the CLI can
report them all at once, followed by the usage text.

Diagnostics are produced by two independent passes over the same tokens:
one that classifies flags and positionals, and one that only looks for
value flags without a value. Unknown options come first, then unknown
arguments, then missing values.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.domain.models import Options

logger = logging.getLogger(__name__)

VALUE_FLAGS = ("url", "username", "query", "output")
BOOLEAN_FLAGS = ("help",)
ALIASES = {"h": "help"}

_TERMINATOR = "--"
_BOOLEAN_LITERALS = ("true", "false")


def _takes_value(token: str | None) -> bool:
    return token is not None and not token.startswith("-")


def _find_missing_values(args: Sequence[str]) -> list[str]:
    """Second pass: report value flags that were given without a value."""

    errors: list[str] = []
    value_flags = {f"--{name}" for name in VALUE_FLAGS}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == _TERMINATOR:
            break
        if not arg.startswith("--"):
            i += 1
            continue
        flag, sep, inline_value = arg.partition("=")
        if flag not in value_flags:
            i += 1
            continue
        if sep:
            if not inline_value:
                errors.append(f"Missing value for: {flag}")
            i += 1
            continue
        following = args[i + 1] if i + 1 < len(args) else None
        # An empty token is consumed by the parse pass but is still no value.
        if not following or following.startswith("-"):
            errors.append(f"Missing value for: {flag}")
            i += 1
            continue
        i += 2
    return errors


def parse_args(raw_args: Sequence[str]) -> Options:
    """Parse ``raw_args`` into an :class:`Options` record.

    Value flags accept ``--flag value`` and ``--flag=value``; the last
    occurrence wins. A bare ``--`` stops flag scanning and every token after
    it is treated as a positional.
    """

    args = list(raw_args)
    help_requested = False
    values: dict[str, str] = {}
    unknown_options: dict[str, None] = {}
    positionals: list[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        following = args[i + 1] if i + 1 < len(args) else None

        if arg == _TERMINATOR:
            positionals.extend(args[i + 1 :])
            break

        if arg.startswith("--"):
            name, sep, inline_value = arg[2:].partition("=")
            name = ALIASES.get(name, name)
            if name in BOOLEAN_FLAGS:
                if sep:
                    help_requested = inline_value != "false"
                elif following in _BOOLEAN_LITERALS:
                    help_requested = following == "true"
                    i += 1
                else:
                    help_requested = True
            elif name in VALUE_FLAGS:
                if sep:
                    values[name] = inline_value
                elif _takes_value(following):
                    values[name] = following
                    i += 1
                else:
                    # Reported by the missing-value pass.
                    values[name] = ""
            else:
                unknown_options.setdefault(name, None)
                if not sep and _takes_value(following):
                    i += 1
            i += 1
            continue

        if arg.startswith("-") and len(arg) > 1:
            letters = arg[1:]
            for position, letter in enumerate(letters):
                last = position == len(letters) - 1
                if ALIASES.get(letter) == "help":
                    help_requested = True
                    if last and following in _BOOLEAN_LITERALS:
                        help_requested = following == "true"
                        i += 1
                    continue
                unknown_options.setdefault(letter, None)
                if last and _takes_value(following):
                    i += 1
            i += 1
            continue

        positionals.append(arg)
        i += 1

    errors = [f"Unknown option: --{name}" for name in unknown_options]
    errors.extend(f"Unknown argument: {value}" for value in positionals)
    errors.extend(_find_missing_values(args))

    options = Options(
        help=help_requested,
        url=values.get("url") or None,
        username=values.get("username") or None,
        query=values.get("query") or None,
        output=values.get("output") or None,
        errors=errors,
    )
    logger.debug("Parsed options: %s", options.model_dump(exclude={"errors"}))
    return options


def validate_options(options: Options) -> Options:
    """Apply the ``--url`` / ``--username`` exclusivity rule.

    Exactly one of them must be present; the result is a copy of
    ``options`` with any violation appended to ``errors``.
    """

    if options.url and options.username:
        return options.with_errors("Use either --url or --username, not both.")
    if not options.url and not options.username:
        return options.with_errors("Missing required --url or --username.")
    return options
