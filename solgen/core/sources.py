# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Split a generated program into its source units."""

from __future__ import annotations

import re

SOURCE_HEADER = re.compile(r"^==== Source: (?P<path>\S+) ====$", re.MULTILINE)


def split_sources(program: str) -> dict[str, str]:
    """
    Map each ``==== Source: <path> ====`` header to the text that follows it,
    up to the next header. Text before the first header is dropped.
    """
    sources: dict[str, str] = {}
    headers = list(SOURCE_HEADER.finditer(program))
    for i, m in enumerate(headers):
        end = headers[i + 1].start() if i + 1 < len(headers) else len(program)
        path = m.group("path")
        if path in sources:
            raise ValueError(f"Duplicate source unit header: {path}")
        body = program[m.end() : end].strip("\n")
        sources[path] = body + "\n" if body else ""
    return sources
