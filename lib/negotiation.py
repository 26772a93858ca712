# =============================================================================
# lib/negotiation.py - Accept Header Negotiation
# =============================================================================
# Picks which of the representations a route can produce best satisfies the
# client's Accept header.
#
# Ranking follows the usual rules: highest q wins, then the most specific
# matching range (type/subtype > type/* > */*), then the client's listing
# order, then the server's offer order. A range with q=0 refuses the type.
#
# Usage:
#   best_match("text/html;q=0.9, application/json", ["application/json", "text/html"])
#   -> "application/json"
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaRange:
    """One comma-separated entry of an Accept header."""

    type: str
    subtype: str
    q: float = 1.0
    index: int = 0

    def specificity(self, media_type: str) -> int:
        """
        How precisely this range matches ``media_type``.

        Returns:
            2 for an exact match, 1 for type/*, 0 for */*, -1 for no match
        """
        offered_type, _, offered_subtype = media_type.lower().partition("/")

        if self.type == "*" and self.subtype == "*":
            return 0
        if self.type != offered_type:
            return -1
        if self.subtype == "*":
            return 1
        if self.subtype == offered_subtype:
            return 2
        return -1


def _parse_q(value: str) -> float | None:
    try:
        q = float(value)
    except ValueError:
        return None
    if q < 0 or q > 1:
        return None
    return q


def parse_accept(header: str | None) -> list[MediaRange]:
    """
    Parse an Accept header into media ranges.

    Malformed entries are skipped. A bare ``*`` is read as ``*/*``.

    Example:
        parse_accept("text/html, application/*;q=0.5")
        -> [MediaRange("text", "html", 1.0, 0), MediaRange("application", "*", 0.5, 1)]
    """
    if not header:
        return []

    ranges = []
    for index, part in enumerate(header.split(",")):
        media, *params = [piece.strip() for piece in part.split(";")]
        media = media.lower()
        if media == "*":
            media = "*/*"

        type_, sep, subtype = media.partition("/")
        if not sep or not type_ or not subtype:
            logger.debug(f"Skipping malformed media range: {part!r}")
            continue

        q = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                parsed = _parse_q(value.strip())
                if parsed is None:
                    logger.debug(f"Ignoring invalid q value in: {part!r}")
                    break
                q = parsed
        else:
            ranges.append(MediaRange(type_, subtype, q, index))

    return ranges


def best_match(header: str | None, offered: list[str]) -> str | None:
    """
    Choose the offered media type the client prefers.

    Args:
        header: Raw Accept header value (None or empty means "anything")
        offered: Media types the caller can produce, in server preference order

    Returns:
        One of ``offered``, or None if the client accepts none of them
    """
    if not offered:
        return None

    if not header or not header.strip():
        return offered[0]

    ranges = parse_accept(header)
    if not ranges:
        # Nothing parseable; treat like a missing header
        return offered[0]

    best: tuple | None = None
    choice = None
    for server_index, media_type in enumerate(offered):
        match = None
        for media_range in ranges:
            specificity = media_range.specificity(media_type)
            if specificity < 0:
                continue
            key = (specificity, -media_range.index)
            if match is None or key > match[0]:
                match = (key, media_range)

        if match is None:
            continue
        (specificity, neg_index), media_range = match
        if media_range.q <= 0:
            continue

        rank = (media_range.q, specificity, neg_index, -server_index)
        if best is None or rank > best:
            best = rank
            choice = media_type

    return choice
