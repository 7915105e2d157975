"""Selector stage configuration: option flags, named modes, and the sentinel token."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields

from csscompress.errors import UnknownOptionError

# Marker string that never occurs in real stylesheet text.
DEFAULT_TOKEN = "@____CSSCOMPRESSION_TOKEN____@"

MODES: dict[str, dict[str, bool]] = {
    "safe": {
        "lowercase-selectors": False,
        "strict-id": False,
        "pseudo-space": True,
    },
    "sane": {
        "lowercase-selectors": True,
        "strict-id": False,
        "pseudo-space": False,
    },
    "small": {
        "lowercase-selectors": True,
        "strict-id": True,
        "pseudo-space": False,
    },
}


def _attr_name(name: str) -> str:
    """Map a dashed option name (``strict-id``) to its attribute (``strict_id``)."""
    return name.strip().replace("-", "_")


@dataclass(frozen=True)
class SelectorOptions:
    """Boolean feature flags read by the selector stage.

    Attributes:
        lowercase_selectors: Case-fold element and pseudo names.
        strict_id: Drop everything before the last id in each selector.
        pseudo_space: Space out ``:first-letter``/``:first-line`` for old renderers.
    """

    lowercase_selectors: bool = True
    strict_id: bool = False
    pseudo_space: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> SelectorOptions:
        """Build options from a mapping keyed by dashed or underscored names."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, bool] = {}
        for name, value in values.items():
            attr = _attr_name(name)
            if attr not in known:
                raise UnknownOptionError(name)
            kwargs[attr] = bool(value)
        return cls(**kwargs)

    @classmethod
    def mode(cls, name: str) -> SelectorOptions:
        """Return the preset options for a named mode (``safe``, ``sane``, ``small``)."""
        try:
            preset = MODES[name]
        except KeyError:
            raise UnknownOptionError(name, kind="mode") from None
        return cls.from_mapping(preset)

    def option(self, name: str) -> bool:
        attr = _attr_name(name)
        if attr not in {f.name for f in fields(self)}:
            raise UnknownOptionError(name)
        return getattr(self, attr)

    def to_dict(self) -> dict[str, bool]:
        """Return the flags keyed by their dashed names."""
        return {key.replace("_", "-"): value for key, value in asdict(self).items()}
