# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Name-based declaration classification."""

import re

from pkgdoc.config import DEFAULT_ERROR_NAME_PATTERN


class ErrorNameClassifier:
    """Classify variable names that follow the exported error convention.

    The check is on spelling only: ``ErrFoo`` is error-like whatever its
    declared type.
    """

    def __init__(self, pattern: str = DEFAULT_ERROR_NAME_PATTERN) -> None:
        """Compile the naming pattern for this classifier.

        Args:
            pattern: Regular expression a full name must match.
        """
        self._pattern = re.compile(pattern, re.ASCII)

    def is_error_like(self, name: str) -> bool:
        return self._pattern.fullmatch(name) is not None
