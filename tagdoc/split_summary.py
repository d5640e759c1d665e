"""Split a preamble into summary and description."""

import re

SUMMARY_RE = re.compile(r"^(.*?[.?])\s(.+)", re.DOTALL)


def split_summary(preamble: str) -> tuple[str, str]:
    """Split at the first '.' or '?' followed by whitespace.

    Without a terminator the whole preamble is the summary.
    """
    m = SUMMARY_RE.match(preamble.strip())
    if not m:
        return preamble.strip(), ""
    return m.group(1).strip(), m.group(2).strip()
