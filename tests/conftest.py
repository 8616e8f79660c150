# tests/conftest.py
import logging

import pytest


@pytest.fixture
def restore_root_logger():
    """
    configure_logging() limpia y reemplaza los handlers raíz.
    Restauramos el estado para no contaminar otros tests.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
