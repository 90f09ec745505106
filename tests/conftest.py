from __future__ import annotations

import logging

import pytest

from zeckendorf import runtime


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path, monkeypatch):
    """Fresh runtime settings and a throwaway workspace for every test."""
    monkeypatch.setenv("ZECKENDORF_HOME", str(tmp_path / "workspace"))
    runtime.reset()
    yield
    runtime.reset()
    lib_logger = logging.getLogger("zeckendorf")
    lib_logger.handlers[:] = []
    lib_logger.setLevel(logging.NOTSET)
    lib_logger.propagate = True
