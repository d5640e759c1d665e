"""Split a doc comment into its preamble and raw tag lines."""

import re

# A tag line begins with @TAG; its value may continue over following lines.
TAG_LINE_RE = re.compile(r"^\s*@(\w+)(?:\s+(.*))?$")


def parse_tags(text: str) -> tuple[str, list[tuple[str, str]]]:
    """Return the preamble and the (tag, value) pairs in source order.

    A value absorbs every following line up to, but not including, the next
    tag line.
    """
    preamble: list[str] = []
    tag_items: list[tuple[str, list[str]]] = []
    for line in text.splitlines():
        m = TAG_LINE_RE.match(line)
        if m:
            tag_items.append((m.group(1), [m.group(2) or ""]))
        elif tag_items:
            tag_items[-1][1].append(line)
        else:
            preamble.append(line)
    return "\n".join(preamble), [(tag, "\n".join(lines)) for tag, lines in tag_items]
