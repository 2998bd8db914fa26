"""Source trimming for display."""

import re

LINE_INDENT = re.compile(r"^([ \t]*)\S", re.MULTILINE)


def outdent(text: str) -> str:
    """Remove the common leading indentation from every line.

    The shortest indentation found on a non-blank line is stripped from the
    start of each line that begins with it. Blank lines are left alone.
    """
    indents = [m.group(1) for m in LINE_INDENT.finditer(text)]
    if not indents:
        return text

    prefix = min(indents, key=len)
    if not prefix:
        return text
    return re.sub(r"(^|\n)" + re.escape(prefix), r"\1", text)
