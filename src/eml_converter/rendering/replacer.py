"""
Regex substitution driven by a match callback.
"""

import re
from typing import Callable, Union

Replacer = Callable[[re.Match], str]


def substitute(text: str, pattern: Union[str, re.Pattern], replacer: Replacer) -> str:
    """
    Replace every match of ``pattern`` in a single forward pass.

    ``replacer`` receives each match object and returns its replacement text.
    Exceptions raised by ``replacer`` abort the substitution and propagate.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    pieces = []
    position = 0
    for match in pattern.finditer(text):
        pieces.append(text[position:match.start()])
        pieces.append(replacer(match))
        position = match.end()
    pieces.append(text[position:])
    return "".join(pieces)
