from csscompress.selectors.driver import (
    Operation,
    SelectorProcessor,
    access,
    normalize,
    release,
    selectors,
)
from csscompress.selectors.rules import parse, pseudo_space, repeats, strictid

__all__ = [
    "Operation",
    "SelectorProcessor",
    "access",
    "normalize",
    "release",
    "selectors",
    "parse",
    "pseudo_space",
    "repeats",
    "strictid",
]
