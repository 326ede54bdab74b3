# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Enum value extraction utilities.

Column comments may embed an enumeration using a fixed micro-format that
downstream generators rely on:

    状态【枚举】：0-待处理，1-处理中，2-已完成

The marker ``【枚举】`` is followed by an ASCII or full-width colon, then items
separated by ``,`` or ``，``. Each item is ``<digits><sep><label>`` where the
separator is ``-``, an em dash ``—`` or a colon. The item list ends at the
first ``。``, ``；``/``;`` or line break.
"""

import re
from typing import Iterable, Optional, Tuple

from ddlschema.schemas.table_models import EnumEntry
from ddlschema.utils.constants import ENUM_COLONS, ENUM_DELIMITERS, ENUM_MARKER, ENUM_SEPARATORS
from ddlschema.utils.loggings import get_logger

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR ENUM EXTRACTION
# =============================================================================

_ENUM_MARKER_RE = re.compile(
    re.escape(ENUM_MARKER) + r"\s*[:：](?P<items>[^。；;\n]*)"
)

_ENUM_ITEM_SPLIT_RE = re.compile(r"[,，]")

_ENUM_ITEM_RE = re.compile(
    r"^(?P<value>\d+)\s*[-—:：]\s*(?P<label>.+)$",
    re.DOTALL,
)


# =============================================================================
# ENUM EXTRACTION FUNCTIONS
# =============================================================================

def has_enum_marker(comment: Optional[str]) -> bool:
    """
    Tell whether a comment carries an enumeration marker with a colon.

    Together with ``decode_enum_comment`` this separates "no marker" from
    "marker present but no valid item".
    """
    if not comment:
        return False
    return _ENUM_MARKER_RE.search(comment) is not None


def decode_enum_comment(comment: Optional[str]) -> Optional[Tuple[EnumEntry, ...]]:
    """
    Decode the enumeration embedded in a column comment.

    Example: "【枚举】：0-待处理，1-处理中" -> (EnumEntry(0, "待处理"), EnumEntry(1, "处理中"))

    Items that do not match ``<digits><sep><label>`` are dropped. Source order
    and duplicate values are preserved.

    Returns:
        Tuple of EnumEntry, or None when there is no marker or no valid item.
    """
    if not comment:
        return None

    match = _ENUM_MARKER_RE.search(comment)
    if not match:
        return None

    entries = []
    for item in _ENUM_ITEM_SPLIT_RE.split(match.group("items")):
        item = item.strip()
        if not item:
            continue
        item_match = _ENUM_ITEM_RE.match(item)
        if not item_match:
            logger.debug(f"Skipping enum item without value-label shape: {item!r}")
            continue
        label = item_match.group("label").strip()
        if not label:
            continue
        entries.append(EnumEntry(value=int(item_match.group("value")), label=label))

    if not entries:
        logger.debug(f"Enum marker present but no valid items in comment: {comment!r}")
        return None

    return tuple(entries)


def encode_enum_comment(
    entries: Iterable[EnumEntry],
    separator: str = "-",
    delimiter: str = "，",
    colon: str = "：",
    prefix: str = "",
) -> str:
    """
    Render entries back into the enumeration micro-format.

    Example: [EnumEntry(0, "待处理")] -> "【枚举】：0-待处理"

    Raises:
        ValueError: If a separator, delimiter or colon outside the recognised
            variants is requested.
    """
    if separator not in ENUM_SEPARATORS:
        raise ValueError(f"Unsupported enum separator: {separator!r}")
    if delimiter not in ENUM_DELIMITERS:
        raise ValueError(f"Unsupported enum delimiter: {delimiter!r}")
    if colon not in ENUM_COLONS:
        raise ValueError(f"Unsupported enum colon: {colon!r}")

    items = delimiter.join(f"{entry.value}{separator}{entry.label}" for entry in entries)
    return f"{prefix}{ENUM_MARKER}{colon}{items}"
