# ruff: noqa: D100,INP001
from __future__ import annotations

import asyncio
import inspect

import pytest

ASYNCIO_PLUGIN = "pytest_asyncio"


def _has_asyncio_plugin(config: pytest.Config) -> bool:
    return config.pluginmanager.hasplugin(ASYNCIO_PLUGIN)


def pytest_configure(config: pytest.Config) -> None:
    if _has_asyncio_plugin(config):
        return
    config.addinivalue_line(
        "markers", "asyncio: run the coroutine test on a fresh event loop"
    )


def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run ``@pytest.mark.asyncio`` coroutines without pytest-asyncio."""

    test = pyfuncitem.obj
    if (
        _has_asyncio_plugin(pyfuncitem.config)
        or not inspect.iscoroutinefunction(test)
        or pyfuncitem.get_closest_marker("asyncio") is None
    ):
        return None

    params = inspect.signature(test).parameters
    kwargs = {name: pyfuncitem.funcargs[name] for name in params}
    asyncio.run(test(**kwargs))
    return True
