"""Split a raw argument vector into global flags and a subcommand.

Purely positional: the only question ever asked of a token is whether
its first character is ``-``.
"""

from __future__ import annotations

from collections.abc import Sequence

from boxctl.core.models import ParsedInvocation


def is_flag(token: str) -> bool:
    return token.startswith("-")


def split_main_and_subcommand(args: Sequence[str]) -> ParsedInvocation:
    """Split *args* into ``(main_args, subcommand, subcommand_args)``.

    Leading flags become ``main_args``.  The first non-flag token is the
    subcommand and everything after it is passed through verbatim.
    When every token is a flag the subcommand is ``None``.

    >>> tuple(split_main_and_subcommand(["-v", "box", "add", "-h"]))
    (['-v'], 'box', ['add', '-h'])
    """
    tokens = list(args)
    for index, token in enumerate(tokens):
        if not is_flag(token):
            return ParsedInvocation(
                main_args=tuple(tokens[:index]),
                subcommand=token,
                subcommand_args=tuple(tokens[index + 1:]),
            )
    return ParsedInvocation(main_args=tuple(tokens), subcommand=None, subcommand_args=())
