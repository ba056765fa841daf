# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Small text helpers for generated TypeScript: doc comments and indentation."""

from __future__ import annotations

import re
import textwrap

# ###############
# Public Interface
# ###############

INDENT = "  "


def doc_comment(description: str | None, deprecated: bool = False) -> list[str]:
    """Return the lines of a JSDoc comment for *description*.

    A short single paragraph renders on one line. Longer descriptions are
    wrapped at 80 columns with a blank line between paragraphs. A deprecated
    member gets a trailing ``@deprecated`` tag. Returns no lines when there is
    nothing to say.
    """
    paragraphs = [p.strip() for p in (description or "").split("\n\n") if p.strip()]
    if deprecated:
        paragraphs.append("@deprecated")
    if not paragraphs:
        return []
    if len(paragraphs) == 1 and len(paragraphs[0]) < 100 and "\n" not in paragraphs[0]:
        return [f"/** {_escape(paragraphs[0])} */"]

    lines = ["/**"]
    for i, paragraph in enumerate(paragraphs):
        if i > 0:
            lines.append(" *")
        for line in paragraph.splitlines():
            for wrapped in textwrap.wrap(_escape(line), 80) or [""]:
                lines.append(f" * {wrapped}")
    lines.append(" */")
    return lines


def reindent(lines: list[str]) -> str:
    """Join *lines* re-indenting each one by its bracket nesting depth.

    Quoted strings and comments are ignored when counting brackets. Blank lines are kept
    empty, and runs of blank lines collapse to one.
    """
    out: list[str] = []
    depth = 0
    for raw in "\n".join(lines).splitlines():
        line = raw.strip()
        if not line:
            if out and out[-1] != "":
                out.append("")
            continue
        structural = _QUOTED.sub("''", line)
        if structural.startswith("*"):
            out.append(INDENT * depth + " " + line)
            continue
        if structural.startswith(("//", "/*")):
            out.append(INDENT * depth + line)
            continue
        leading = len(structural) - len(structural.lstrip("}])"))
        opened = sum(structural.count(c) for c in "{([")
        closed = sum(structural.count(c) for c in "}])")
        out.append(INDENT * max(depth - leading, 0) + line)
        depth = max(depth + opened - closed, 0)
    while out and out[-1] == "":
        out.pop()
    return "\n".join(out) + "\n"


# ################
# Implementation
# ################

_QUOTED = re.compile(r"'(?:\\.|[^'\\])*'|\"(?:\\.|[^\"\\])*\"|`(?:\\.|[^`\\])*`")


def _escape(text: str) -> str:
    return text.replace("*/", "*\\/")
