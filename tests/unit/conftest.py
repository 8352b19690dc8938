"""Unit test configuration - isolated environment and logging"""

import logging

import pytest

from docsearch import config

ENV_VARS = ("DOCSEARCH_MAX_RESULTS", "LOG_LEVEL", "DOCSEARCH_LOG_FILE")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Start every test from default settings.

    Env vars are set then deleted so monkeypatch restores the original
    state even when a test (or load_dotenv) sets them later. The working
    directory is an empty temp folder so no real .env file is picked up.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_settings", None)
    yield


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger"""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def pet_corpus():
    """Stop words, documents and query from the console example"""
    return {
        "stop_words": "a the on",
        "documents": [
            "white cat and fashionable collar",
            "fluffy cat fluffy tail",
            "groomed dog expressive eyes",
        ],
        "query": "fluffy groomed cat",
    }
