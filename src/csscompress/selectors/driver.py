"""Selector stage driver: runs the rewriting rules over a list of selectors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from csscompress.config import DEFAULT_TOKEN, SelectorOptions
from csscompress.errors import UnknownOperationError
from csscompress.selectors.rules import parse, pseudo_space, repeats, strictid

__all__ = [
    "Operation",
    "SelectorProcessor",
    "access",
    "normalize",
    "release",
    "selectors",
]

logger = logging.getLogger(__name__)


class Operation(StrEnum):
    """Operations reachable through :func:`access`."""

    PARSE = "parse"
    STRICT_ID = "strictid"
    REPEATS = "repeats"
    PSEUDO_SPACE = "pseudoSpace"
    SELECTORS = "selectors"


def _check_token(token: str) -> None:
    if not token:
        raise ValueError("sentinel token must be a non-empty string")


def normalize(selector: str, options: SelectorOptions, token: str) -> str:
    """Rewrite a single selector; selectors starting with *token* pass through as-is."""
    if selector.startswith(token):
        return selector
    selector = parse(selector, token, options.lowercase_selectors)
    if options.strict_id:
        selector = strictid(selector)
    selector = repeats(selector)
    if options.pseudo_space:
        selector = pseudo_space(selector)
    return selector


def selectors(
    selector_list: list[str],
    options: SelectorOptions | None = None,
    token: str = DEFAULT_TOKEN,
    max_workers: int | None = None,
) -> list[str]:
    """Normalize every selector in *selector_list* in place and return the list.

    With *max_workers* above 1 the selectors are rewritten on a thread pool;
    the order of the list is preserved either way.
    """
    _check_token(token)
    options = options or SelectorOptions()

    def _rewrite(selector: str) -> str:
        return normalize(selector, options, token)

    if max_workers and max_workers > 1 and len(selector_list) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(_rewrite, selector_list))
    else:
        results = [_rewrite(selector) for selector in selector_list]

    skipped = sum(1 for selector in selector_list if selector.startswith(token))
    selector_list[:] = results
    logger.debug(
        "Selectors normalized: rewritten=%d skipped=%d",
        len(selector_list) - skipped,
        skipped,
    )
    return selector_list


def release(text: str, token: str = DEFAULT_TOKEN) -> str:
    """Strip every occurrence of *token* from *text*."""
    if not token:
        return text
    return text.replace(token, "")


_Runner = Callable[[tuple[Any, ...], SelectorOptions, str], Any]

_OPERATIONS: dict[Operation, _Runner] = {
    Operation.PARSE: lambda args, options, token: parse(
        *args, token=token, lowercase=options.lowercase_selectors
    ),
    Operation.STRICT_ID: lambda args, options, token: strictid(*args),
    Operation.REPEATS: lambda args, options, token: repeats(*args),
    Operation.PSEUDO_SPACE: lambda args, options, token: pseudo_space(*args),
    Operation.SELECTORS: lambda args, options, token: selectors(
        *args, options=options, token=token
    ),
}


def access(
    operation: Operation | str,
    *args: Any,
    options: SelectorOptions | None = None,
    token: str = DEFAULT_TOKEN,
) -> Any:
    """Invoke a single selector operation by name, mainly for tests.

    Raises UnknownOperationError when *operation* names no known operation.
    """
    try:
        op = Operation(operation)
    except ValueError:
        raise UnknownOperationError(str(operation)) from None
    return _OPERATIONS[op](args, options or SelectorOptions(), token)


@dataclass(frozen=True)
class SelectorProcessor:
    """Selector stage bound to one set of options and one sentinel token."""

    options: SelectorOptions = field(default_factory=SelectorOptions)
    token: str = DEFAULT_TOKEN
    max_workers: int | None = None

    def __post_init__(self) -> None:
        _check_token(self.token)

    def selectors(self, selector_list: list[str]) -> list[str]:
        return selectors(selector_list, self.options, self.token, self.max_workers)

    def access(self, operation: Operation | str, *args: Any) -> Any:
        return access(operation, *args, options=self.options, token=self.token)

    def release(self, text: str) -> str:
        return release(text, self.token)
