import pytest

from vecmath import available_backends, get_algebra_config, set_algebra_config, use_backend


@pytest.fixture(autouse=True)
def _restore_algebra_config():
    saved = get_algebra_config()
    yield
    set_algebra_config(saved)


@pytest.fixture(params=available_backends())
def backend(request):
    with use_backend(request.param) as selected:
        yield selected
