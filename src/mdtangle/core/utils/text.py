"""Line splitting and marker constants shared by the tangle stages"""


MARKER = '######'
ESCAPED_MARKER = '\\' + MARKER
BLOCK_START = '\n' + MARKER + ' '
FENCE = '```'
FILE_PREFIX = 'file:'


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only; a single trailing line break adds no empty final line."""
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def join_lines(lines: list[str]) -> str:
    return '\n'.join(lines)


def leading_whitespace(line: str) -> str:
    """Return the run of whitespace characters at the start of line."""
    return line[:len(line) - len(line.lstrip())]
