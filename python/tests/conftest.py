"""
Pytest configuration and fixtures for webdbg tests.
"""
import logging

import pytest

from python.webdbg.transformer import UrlPathTransformer


@pytest.fixture
def transformer():
    """Transformer configured with a single ``/app/`` mapping and no webRoot."""
    instance = UrlPathTransformer(logger=logging.getLogger("webdbg.test"))
    instance.launch({"pathMapping": {"/app/": "/home/user/proj"}})
    return instance


@pytest.fixture
def info_caplog(caplog):
    caplog.set_level(logging.DEBUG)
    return caplog
