import os
from typing import Any, List, Tuple

import pytest

from solid_principles._package import ENV_PREFIX
from solid_principles.application.dispatcher import VariantDispatcher
from solid_principles.domain.base.ports import LoggingPort


class CapturingLogger(LoggingPort):
    """LoggingPort sink recording (level, message) pairs in call order."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def debug(self, message: str, **context: Any) -> None:
        self.records.append(("debug", message))

    def info(self, message: str, **context: Any) -> None:
        self.records.append(("info", message))

    def warning(self, message: str, **context: Any) -> None:
        self.records.append(("warning", message))

    def error(self, message: str, **context: Any) -> None:
        self.records.append(("error", message))

    @property
    def lines(self) -> List[Tuple[str, str]]:
        """Records without debug noise."""
        return [record for record in self.records if record[0] != "debug"]

    @property
    def infos(self) -> List[str]:
        return [message for level, message in self.records if level == "info"]

    @property
    def errors(self) -> List[str]:
        return [message for level, message in self.records if level == "error"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration overrides from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def capturing_logger():
    return CapturingLogger()


@pytest.fixture
def dispatcher():
    return VariantDispatcher()
