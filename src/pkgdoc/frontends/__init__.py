# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Front-ends producing parsed packages."""

from pkgdoc.frontends.json_document import JsonDocumentFrontEnd, parse_document

__all__ = ["JsonDocumentFrontEnd", "parse_document"]
