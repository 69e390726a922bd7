from __future__ import annotations

import logging

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry("marker")

    @reg.register(None)
    class RoundDot:  # noqa: N801 (テスト用)
        pass

    assert reg.is_registered("round_dot")
    assert reg.get("RoundDot") is RoundDot
    assert "round_dot" in reg.list_all()


def test_single_letter_class_name_is_lowercased() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    class X:  # noqa: N801 (テスト用)
        pass

    assert reg.list_all() == ["x"]
    assert reg.get("X") is X


def test_duplicate_and_unregister() -> None:
    reg = BaseRegistry("marker")

    @reg.register(None)
    def sample():  # noqa: ANN001 - テスト用
        return 1

    with pytest.raises(ValueError, match="already registered"):
        reg.register("sample")(lambda: 2)

    # 同一オブジェクトの再登録は許容
    reg.register("sample")(sample)

    reg.unregister("Sample")
    assert not reg.is_registered("sample")


def test_unknown_key_raises_key_error_with_label() -> None:
    reg = BaseRegistry("marker")
    with pytest.raises(KeyError, match="marker 'nope'"):
        reg.get("nope")


def test_invalid_keys() -> None:
    reg = BaseRegistry()
    with pytest.raises(ValueError):
        reg.is_registered("")
    with pytest.raises(TypeError):
        reg.is_registered(3)  # type: ignore[arg-type]


def test_key_normalization_hyphen_to_snake() -> None:
    reg = BaseRegistry()

    @reg.register("open-circle")
    def fn():  # noqa: ANN001 - テスト用
        return 0

    assert reg.is_registered("open_circle")
    assert reg.get("open-circle") is fn


def test_registry_property_is_copy_and_clear() -> None:
    reg = BaseRegistry()
    reg.register("a")(object)
    snap = reg.registry
    snap["bogus"] = object()
    assert not reg.is_registered("bogus")
    reg.clear()
    assert reg.list_all() == []


def test_register_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    reg = BaseRegistry("marker")
    with caplog.at_level(logging.DEBUG, logger="common.base_registry"):
        reg.register("dot")(object)
    assert any("registered marker 'dot'" in r.getMessage() for r in caplog.records)
