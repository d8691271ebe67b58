"""Magnitude suffix detection (K/M/B and spelled-out forms)."""

import logging

from ..config import PrizepoolConfigManager

logger = logging.getLogger(__name__)


class MultiplierResolver:
    """Resolves a trailing magnitude suffix into an integer multiplier.

    Suffixes are tried longest first so that "million" is not cut short by
    "m" and "bil" is not cut short by "b".
    """

    def __init__(self, config_manager: PrizepoolConfigManager):
        """Initialize resolver with suffixes from configuration.

        Args:
            config_manager: Configuration manager with multiplier mappings
        """
        multipliers = config_manager.get_multipliers()
        self.suffixes: tuple[tuple[str, int], ...] = tuple(
            sorted(multipliers.items(), key=lambda item: len(item[0]), reverse=True)
        )

    def resolve(self, text: str) -> tuple[int, str]:
        """Detect and remove a trailing magnitude suffix.

        Args:
            text: Trimmed working copy of the prize pool, currency aliases removed

        Returns:
            (multiplier, remainder). Multiplier is 1 and the text is returned
            unchanged when no suffix matches.
        """
        lowered = text.lower()
        for suffix, multiplier in self.suffixes:
            if lowered.endswith(suffix):
                remainder = text[: len(text) - len(suffix)].strip()
                logger.debug(f"Resolved suffix '{suffix}' in '{text}' -> x{multiplier}")
                return multiplier, remainder
        return 1, text
