"""Brace expansion.

Balanced ``{...}`` groups hold comma separated alternatives; every
combination of alternatives is produced, nested groups included::

    'It{{em,alic}iz,erat}e{d,}, please.'  ->  'Itemized, please.',
                                              'Itemize, please.',
                                              'Italicized, please.',
                                              'Italicize, please.',
                                              'Iterated, please.',
                                              'Iterate, please.'

The innermost group that closes first is rewritten on each step, so every
rewrite removes exactly one pair of braces and the expansion terminates.
"""

from __future__ import annotations

from typing import Iterator

from . import config
from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("braces")


def is_balanced(input_str: str) -> tuple[bool, int | None]:
    """Check if braces are balanced. Returns (is_balanced, error_position)."""
    stack: list[int] = []
    for i, char in enumerate(input_str):
        if char == "{":
            stack.append(i)
        elif char == "}":
            if not stack:
                return False, i
            stack.pop()
    if stack:
        return False, stack[0]  # Position of first unmatched
    return True, None


def _find_innermost_group(text: str) -> tuple[int, int] | None:
    """Return ``(open, close)`` indices of the first innermost group, or None."""
    close = text.find("}")
    if close == -1:
        return None
    return text.rindex("{", 0, close), close


def _split_alternatives(body: str) -> list[str]:
    alternatives = []
    start = 0
    for i, char in enumerate(body):
        if char == ",":
            alternatives.append(body[start:i])
            start = i + 1
    alternatives.append(body[start:])
    return alternatives


def _rewrite(text: str) -> list[str] | None:
    """Expand one brace group of ``text``; None when no group is left."""
    group = _find_innermost_group(text)
    if group is None:
        return None
    open_idx, close_idx = group
    head, tail = text[:open_idx], text[close_idx + 1 :]
    return [head + alt + tail for alt in _split_alternatives(text[open_idx + 1 : close_idx])]


def _expand(text: str) -> Iterator[str]:
    # Partly expanded candidates are deduplicated too, so repeated
    # alternatives never get expanded twice.
    queued = {text}
    pending = [text]
    results = 0
    while pending:
        candidate = pending.pop()
        rewritten = _rewrite(candidate)
        if rewritten is not None:
            # Reversed so alternatives come out in the order they were written
            for alternative in reversed(rewritten):
                if alternative not in queued:
                    queued.add(alternative)
                    pending.append(alternative)
            continue
        if results >= config.MAX_EXPANSIONS:
            raise ValidationError(
                f"Brace expansion exceeds {config.MAX_EXPANSIONS} results",
                "TOO_MANY_EXPANSIONS",
            )
        results += 1
        yield candidate
    logger.debug("Expanded %r into %d strings", text, results)


def expand_braces(text: str) -> Iterator[str]:
    """Expand every brace group of ``text``.

    Args:
        text: String possibly containing ``{a,b,...}`` groups, nested or not

    Returns:
        Lazy iterator over the distinct expansions. Order is not significant.
        A string without braces yields itself once.

    Raises:
        ValidationError: If the braces are unbalanced (``UNBALANCED_BRACES``)
            or the text is too long (``TOO_LONG``). Exceeding the configured
            number of results raises ``TOO_MANY_EXPANSIONS`` during iteration.

    Example:
        >>> sorted(expand_braces("thumbnail.{png,jp{e,}g}"))
        ['thumbnail.jpeg', 'thumbnail.jpg', 'thumbnail.png']
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"Expected a string, got {type(text).__name__}", "INVALID_INPUT"
        )
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    balanced, position = is_balanced(text)
    if not balanced:
        logger.warning("Unbalanced brace in %r at position %s", text, position)
        raise ValidationError(
            f"Unbalanced brace at position {position}", "UNBALANCED_BRACES"
        )
    return _expand(text)
