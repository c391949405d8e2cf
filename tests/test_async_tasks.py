from __future__ import annotations

import asyncio

from loguru import logger
import pytest

pytest.importorskip("PySide6.QtWidgets")

from app.views.async_tasks import CommandRunner  # noqa: E402


@pytest.fixture
def captured_logs():
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="INFO")
    yield messages
    logger.remove(handler_id)


def test_runner_keeps_tasks_until_done() -> None:
    async def main() -> list[int]:
        runner = CommandRunner()
        results: list[int] = []

        async def command() -> None:
            await asyncio.sleep(0)
            results.append(1)

        task = runner.dispatch("demo", command)
        assert runner.pending == 1
        await task
        await asyncio.sleep(0)
        assert runner.pending == 0
        return results

    assert asyncio.run(main()) == [1]


def test_runner_logs_escaping_exceptions(captured_logs: list[str]) -> None:
    async def main() -> None:
        runner = CommandRunner()

        async def boom() -> None:
            raise RuntimeError("kaput")

        task = runner.dispatch("boom", boom)
        await asyncio.gather(task, return_exceptions=True)
        await asyncio.sleep(0)
        assert runner.pending == 0

    asyncio.run(main())

    assert any("Command boom failed: kaput" in m for m in captured_logs)
