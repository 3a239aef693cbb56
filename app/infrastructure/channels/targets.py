"""Delivery target resolution.

Precedence is fixed for every channel that supports mentions:

1. ``mention_all`` -> the provider's "everyone" sentinel, explicit
   mentions ignored
2. explicit ``mention_user_ids`` -> those ids
3. otherwise the channel config's default recipient
"""

from typing import List, Sequence

from infrastructure.channels.models import UnifiedMessageContent

EVERYONE = "@all"
DEFAULT_SEPARATOR = "|"


def resolve_target(
    content: UnifiedMessageContent,
    default: str,
    everyone: str = EVERYONE,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Resolve the recipient string for providers taking one joined field.

    Example:
        >>> content = UnifiedMessageContent(body="x", mention_user_ids=["u1", "u2"])
        >>> resolve_target(content, "ops")
        'u1|u2'
    """
    if content.is_mention_all():
        return everyone
    if content.mention_user_ids:
        return separator.join(content.mention_user_ids)
    return default


def resolve_recipients(
    content: UnifiedMessageContent,
    default: Sequence[str],
    everyone: str = EVERYONE,
) -> List[str]:
    """Resolve the recipient list for providers taking an array of mentions."""
    if content.is_mention_all():
        return [everyone]
    if content.mention_user_ids:
        return list(content.mention_user_ids)
    return list(default)
