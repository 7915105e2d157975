from __future__ import annotations

import pytest

from csscompress.config import DEFAULT_TOKEN, MODES, SelectorOptions
from csscompress.errors import UnknownOptionError


class TestSelectorOptions:
    def test_default_values(self) -> None:
        opts = SelectorOptions()
        assert opts.lowercase_selectors is True
        assert opts.strict_id is False
        assert opts.pseudo_space is False

    def test_custom_values(self) -> None:
        opts = SelectorOptions(lowercase_selectors=False, strict_id=True, pseudo_space=True)
        assert opts.lowercase_selectors is False
        assert opts.strict_id is True
        assert opts.pseudo_space is True

    def test_frozen_immutability(self) -> None:
        opts = SelectorOptions()
        with pytest.raises(AttributeError):
            opts.strict_id = True  # type: ignore[misc]

    def test_equality(self) -> None:
        assert SelectorOptions() == SelectorOptions()
        assert SelectorOptions(strict_id=True) != SelectorOptions()

    def test_hashable(self) -> None:
        opts = SelectorOptions()
        assert opts in {opts}


class TestFromMapping:
    def test_dashed_names(self) -> None:
        opts = SelectorOptions.from_mapping({"strict-id": True, "pseudo-space": True})
        assert opts == SelectorOptions(strict_id=True, pseudo_space=True)

    def test_underscored_names(self) -> None:
        opts = SelectorOptions.from_mapping({"lowercase_selectors": False})
        assert opts.lowercase_selectors is False

    def test_values_coerced_to_bool(self) -> None:
        opts = SelectorOptions.from_mapping({"strict-id": 1})
        assert opts.strict_id is True

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownOptionError) as exc_info:
            SelectorOptions.from_mapping({"color-names": True})
        assert exc_info.value.name == "color-names"


class TestModes:
    @pytest.mark.parametrize("name", sorted(MODES))
    def test_every_mode_loads(self, name: str) -> None:
        assert SelectorOptions.mode(name).to_dict() == MODES[name]

    def test_sane_is_default(self) -> None:
        assert SelectorOptions.mode("sane") == SelectorOptions()

    def test_small_enables_strict_id(self) -> None:
        assert SelectorOptions.mode("small").strict_id is True

    def test_unknown_mode(self) -> None:
        with pytest.raises(UnknownOptionError) as exc_info:
            SelectorOptions.mode("tiny")
        assert exc_info.value.kind == "mode"


class TestOptionLookup:
    def test_by_dashed_name(self) -> None:
        assert SelectorOptions(strict_id=True).option("strict-id") is True

    def test_unknown(self) -> None:
        with pytest.raises(UnknownOptionError):
            SelectorOptions().option("nope")

    def test_to_dict(self) -> None:
        assert SelectorOptions().to_dict() == {
            "lowercase-selectors": True,
            "strict-id": False,
            "pseudo-space": False,
        }


def test_default_token_is_not_css() -> None:
    assert DEFAULT_TOKEN.startswith("@")
    assert " " not in DEFAULT_TOKEN
