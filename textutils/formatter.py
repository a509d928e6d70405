"""Configured front end for the string transforms.

TextFormatter reads the ``wrap``, ``abbreviate`` and ``initials`` sections
of the configuration once and applies them as defaults on every call.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from config import ConfigurationError, get_config_value, load_config
from textutils.primitives import is_blank
from textutils.string_utils import abbreviate, initials, swap_case, wrap


logger = logging.getLogger(__name__)


def _require_int(value: Any, key_path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{key_path} must be an integer, got {value!r}")
    return value


def _require_bool(value: Any, key_path: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{key_path} must be true or false, got {value!r}")
    return value


def _require_optional_str(value: Any, key_path: str) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ConfigurationError(f"{key_path} must be a string, got {value!r}")
    return value


class TextFormatter:
    """Applies the string transforms with configured defaults.

    Example:
        formatter = TextFormatter({'wrap': {'width': 20, 'new_line': '\\n'}})
        formatter.wrap("Here is one line of text that is going to be wrapped")
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
    ):
        """Initialize the formatter.

        Args:
            config: Configuration dictionary (if not provided, loads from file).
            config_path: Path to config file (if config not provided).

        Raises:
            ConfigurationError: If a configured value is invalid.
        """
        if config is None:
            config = load_config(config_path)
        self.config = config

        self.width = _require_int(
            get_config_value(config, 'wrap.width', 80), 'wrap.width'
        )
        self.new_line = _require_optional_str(
            get_config_value(config, 'wrap.new_line'), 'wrap.new_line'
        )
        self.wrap_long_words = _require_bool(
            get_config_value(config, 'wrap.wrap_long_words', False), 'wrap.wrap_long_words'
        )
        self.wrap_on = _require_optional_str(
            get_config_value(config, 'wrap.wrap_on', ' '), 'wrap.wrap_on'
        )

        self.lower = _require_int(
            get_config_value(config, 'abbreviate.lower', 0), 'abbreviate.lower'
        )
        self.upper = _require_int(
            get_config_value(config, 'abbreviate.upper', -1), 'abbreviate.upper'
        )
        self.marker = _require_optional_str(
            get_config_value(config, 'abbreviate.marker', '...'), 'abbreviate.marker'
        )

        self.delimiters = self._parse_delimiters(
            get_config_value(config, 'initials.delimiters')
        )

        self._validate()

        logger.debug(
            f"Text formatter initialized: width={self.width}, "
            f"wrap_on={self.wrap_on!r}, wrap_long_words={self.wrap_long_words}"
        )

    @staticmethod
    def _parse_delimiters(value: Any) -> Optional[List[str]]:
        """Normalize configured delimiters to a list of characters.

        A string is split into its characters; a list must hold
        single-character strings.
        """
        if value is None:
            return None
        if isinstance(value, str):
            return list(value)
        if isinstance(value, list):
            for item in value:
                if not isinstance(item, str) or len(item) != 1:
                    raise ConfigurationError(
                        f"initials.delimiters entries must be single characters, got {item!r}"
                    )
            return list(value)
        raise ConfigurationError(
            f"initials.delimiters must be a string or a list, got {value!r}"
        )

    def _validate(self) -> None:
        """Check cross-field constraints and compile the wrap pattern."""
        if self.upper < -1:
            raise ConfigurationError("abbreviate.upper cannot be less than -1")
        if self.upper < self.lower and self.upper != -1:
            raise ConfigurationError("abbreviate.upper is less than abbreviate.lower")

        if not is_blank(self.wrap_on):
            try:
                re.compile(self.wrap_on)
            except re.error as e:
                raise ConfigurationError(f"Invalid wrap.wrap_on pattern: {e}") from e

    def wrap(
        self,
        text: Optional[str],
        width: Optional[int] = None,
        new_line: Optional[str] = None,
        wrap_long_words: Optional[bool] = None,
        wrap_on: Optional[str] = None,
    ) -> Optional[str]:
        """Wrap text using configured defaults for any argument not given.

        Args:
            text: The string to wrap.
            width: Override for wrap.width.
            new_line: Override for wrap.new_line.
            wrap_long_words: Override for wrap.wrap_long_words.
            wrap_on: Override for wrap.wrap_on.

        Returns:
            The wrapped string, or None if text is None.
        """
        return wrap(
            text,
            self.width if width is None else width,
            self.new_line if new_line is None else new_line,
            self.wrap_long_words if wrap_long_words is None else wrap_long_words,
            self.wrap_on if wrap_on is None else wrap_on,
        )

    def abbreviate(
        self,
        text: Optional[str],
        lower: Optional[int] = None,
        upper: Optional[int] = None,
        append_to_end: Optional[str] = None,
    ) -> Optional[str]:
        """Abbreviate text using configured defaults for any argument not given."""
        return abbreviate(
            text,
            self.lower if lower is None else lower,
            self.upper if upper is None else upper,
            self.marker if append_to_end is None else append_to_end,
        )

    def initials(self, text: Optional[str]) -> Optional[str]:
        """Extract initials using the configured delimiters."""
        return initials(text, self.delimiters)

    def swap_case(self, text: Optional[str]) -> Optional[str]:
        """Swap case; takes no configured settings."""
        return swap_case(text)
