import logging

import pytest

from documents import CLEAN_API, ORDERS_API


@pytest.fixture(autouse=True)
def restore_root_logging():
    # The CLI reconfigures root handlers around captured streams
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def orders_api_file(tmp_path):
    path = tmp_path / "orders.yaml"
    path.write_text(ORDERS_API, encoding="utf-8")
    return path


@pytest.fixture
def clean_api_file(tmp_path):
    path = tmp_path / "clean.yaml"
    path.write_text(CLEAN_API, encoding="utf-8")
    return path
