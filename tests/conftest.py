"""
Pytest fixtures for e5e tests.
"""

from typing import Any, Callable, Generator, NamedTuple

import pytest

from e5e.core.config import RuntimeConfig, get_runtime_config
from e5e.sdk import main

from sample_handlers import SampleEntrypoints


class InvocationOutcome(NamedTuple):
    code: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def clear_config_cache() -> Generator[None, None, None]:
    get_runtime_config.cache_clear()
    yield
    get_runtime_config.cache_clear()


@pytest.fixture
def handler() -> SampleEntrypoints:
    return SampleEntrypoints()


@pytest.fixture
def config() -> RuntimeConfig:
    return RuntimeConfig(capture_mode="buffer", payload_source="inline")


@pytest.fixture
def invoke(
    capsys: pytest.CaptureFixture[str], handler: SampleEntrypoints, config: RuntimeConfig
) -> Callable[..., InvocationOutcome]:
    """Run the bootstrap against the sample handler and collect its streams."""

    def _invoke(*args: str, target: Any = None, runtime_config: RuntimeConfig | None = None) -> InvocationOutcome:
        code = main(
            handler if target is None else target,
            ["cmd", *args],
            config=runtime_config or config,
        )
        captured = capsys.readouterr()
        return InvocationOutcome(code=code, stdout=captured.out, stderr=captured.err)

    return _invoke
