import logging

import pytest

from vecmath import AlgebraConfig, get_algebra_config, get_backend, set_algebra_config, use_backend


def test_default_backend_is_scalar():
    assert get_algebra_config().backend == "scalar"
    assert get_backend().name == "scalar"


def test_config_is_copied():
    config = get_algebra_config()
    config.backend = "simd"
    assert get_algebra_config().backend == "scalar"


def test_set_algebra_config_switches_backend(caplog):
    with caplog.at_level(logging.DEBUG, logger="vecmath.config"):
        set_algebra_config(AlgebraConfig(backend="simd"))
    assert get_backend().name == "simd"
    assert "scalar -> simd" in caplog.text


def test_set_algebra_config_rejects_unknown_backend():
    with pytest.raises(ValueError, match="unknown backend"):
        set_algebra_config(AlgebraConfig(backend="avx512"))
    assert get_algebra_config().backend == "scalar"


def test_use_backend_restores_previous_choice():
    with use_backend("simd") as backend:
        assert backend.name == "simd"
        assert get_backend().name == "simd"
    assert get_backend().name == "scalar"


def test_use_backend_restores_after_error():
    with pytest.raises(RuntimeError):
        with use_backend("simd"):
            raise RuntimeError("boom")
    assert get_backend().name == "scalar"


def test_explicit_backend_overrides_config():
    with use_backend("simd"):
        assert get_backend("scalar").name == "scalar"
