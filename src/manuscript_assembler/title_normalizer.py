#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module for chapter title cleanup
# - Built-in cleanup steps are an ordered list of named transforms
# - Custom separators are escaped and removed after the built-in steps
#

r"""
title_normalizer.py - Chapter title cleanup
===========================================

Turns the residual title left by filename extraction into a display title.
Each step assumes the output of the step before it:

╔═══╦═══════════════════╦═══════════════════════════════╦═════════════╗
║ # ║ Step              ║ Pattern                       ║ Replacement ║
╠═══╬═══════════════════╬═══════════════════════════════╬═════════════╣
║ 1 ║ dash-letter-dash  ║ \s*-+\s*[a-z]\s*-+\s*     (i) ║ " "         ║
║ 2 ║ HERE marker       ║ \s*-+\s+HERE\s+-+\s*      (i) ║ " "         ║
║ 3 ║ dash runs         ║ \s*-{2,}\s*                   ║ " "         ║
║ 4 ║ edge separators   ║ ^[\s\-_:.]+  and  [\s\-_:.]+$ ║ ""          ║
║ 5 ║ whitespace runs   ║ \s+  (then trim)              ║ " "         ║
║ 6 ║ custom separators ║ \s*<escaped token>\s*     (i) ║ " " + trim  ║
╚═══╩═══════════════════╩═══════════════════════════════╩═════════════╝

(i) = case-insensitive. Custom tokens are matched as literal text.
The leading \s* of steps 1-3 and 6 only starts at the beginning of a
whitespace run, which keeps every step a single linear scan.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, NamedTuple, Optional, Union

from .filename_patterns import (
    DASH_LETTER_DASH_RE,
    DASH_RUN_RE,
    HERE_MARKER_RE,
    LEADING_SEPARATORS_RE,
    TRAILING_SEPARATORS_RE,
    WHITESPACE_RUN_RE,
    custom_separator_pattern,
)

SeparatorConfig = Union[str, Iterable[str], None]


class TitleTransform(NamedTuple):
    """A named, pure string transform in the cleanup pipeline."""

    name: str
    apply: Callable[[str], str]


def _substitute(pattern: re.Pattern[str], replacement: str) -> Callable[[str], str]:
    return lambda text: pattern.sub(replacement, text)


def _strip_edge_separators(text: str) -> str:
    text = LEADING_SEPARATORS_RE.sub("", text)
    return TRAILING_SEPARATORS_RE.sub("", text)


def _collapse_whitespace(text: str) -> str:
    return WHITESPACE_RUN_RE.sub(" ", text).strip()


TITLE_TRANSFORMS: list[TitleTransform] = [
    TitleTransform("dash_letter_dash", _substitute(DASH_LETTER_DASH_RE, " ")),
    TitleTransform("here_marker", _substitute(HERE_MARKER_RE, " ")),
    TitleTransform("dash_runs", _substitute(DASH_RUN_RE, " ")),
    TitleTransform("edge_separators", _strip_edge_separators),
    TitleTransform("whitespace", _collapse_whitespace),
]


def parse_separator_config(config: SeparatorConfig) -> list[str]:
    """
    Turn the ignore-separators setting into a list of tokens.

    Accepts the comma-separated string stored in settings, an iterable of
    tokens, or None. Tokens are trimmed and empty ones dropped; order is kept.

    Args:
        config: Separator setting

    Returns:
        List of non-empty separator tokens
    """
    if config is None:
        return []
    if isinstance(config, str):
        raw_tokens: Iterable[str] = config.split(",")
    else:
        raw_tokens = config
    return [token.strip() for token in raw_tokens if token and token.strip()]


def remove_custom_separators(title: str, separators: Iterable[str]) -> str:
    """Remove every case-insensitive occurrence of each literal separator token."""
    for token in separators:
        title = custom_separator_pattern(token).sub(" ", title).strip()
    return title


def normalize(residual: str, custom_separators: SeparatorConfig = None, fallback: Optional[str] = None) -> str:
    """
    Clean a residual title.

    Args:
        residual: Title text left after chapter and date removal
        custom_separators: User separator tokens (string setting or list)
        fallback: Returned when the cleaned title is empty

    Returns:
        Cleaned title; ``fallback`` if the title ends up empty and one is given
    """
    title = residual
    for transform in TITLE_TRANSFORMS:
        title = transform.apply(title)

    title = remove_custom_separators(title, parse_separator_config(custom_separators))

    if not title and fallback is not None:
        return fallback
    return title
