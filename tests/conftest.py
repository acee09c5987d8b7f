import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() перенастраивает корневой логгер, возвращаем его в исходное состояние"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
