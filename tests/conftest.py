import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_stamp_environment(monkeypatch):
    """Remove any ``STAMP_*`` variables from the environment.

    Settings are read from the environment, so a developer's shell must
    not change the outcome of the tests.
    """
    for name in ("STAMP_DRY_RUN", "STAMP_VERBOSE", "STAMP_NO_UNSTAGED_FALLBACK"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop root handlers installed by ``main()`` during a CLI test.

    ``logging.basicConfig`` binds the handler to the CliRunner's stream,
    which is closed once the invocation returns.
    """
    before = list(logging.root.handlers)
    yield
    for handler in list(logging.root.handlers):
        if handler not in before:
            logging.root.removeHandler(handler)
