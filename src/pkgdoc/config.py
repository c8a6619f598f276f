# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Assembly configuration."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TEST_SUFFIX = "_test.go"
DEFAULT_ERROR_NAME_PATTERN = r"^Err[A-Z]\w*$"
DEFAULT_COMMENT_WIDTH = 80


@dataclass(frozen=True)
class AssemblyConfig:
    """Tune the naming conventions used while assembling a package model.

    Attributes:
        test_suffix: File name suffix routing a file to the test file list.
        error_name_pattern: Regular expression matching error-like variable names.
        comment_width: Default column width for wrapped documentation text.
    """

    test_suffix: str = DEFAULT_TEST_SUFFIX
    error_name_pattern: str = DEFAULT_ERROR_NAME_PATTERN
    comment_width: int = DEFAULT_COMMENT_WIDTH

    def __post_init__(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If the suffix is empty, the pattern does not compile, or
                the width is negative.
        """
        if not self.test_suffix:
            raise ValueError("test_suffix must not be empty.")
        if self.comment_width < 0:
            raise ValueError("comment_width must be >= 0.")
        try:
            re.compile(self.error_name_pattern)
        except re.error as exc:
            logger.warning(
                f"Invalid error name pattern (pattern={self.error_name_pattern!r} error={exc})"
            )
            raise ValueError(
                f"error_name_pattern does not compile: {self.error_name_pattern}"
            ) from exc
