"""Post-start commands.

A post-start command runs inside a freshly started container once the
settle delay has passed. Waiting out the delay and launching the exec
session happen in the caller's flow; the caller never waits for the command
itself: output goes to the ``lanzo.post_start`` logger and the outcome lands
on ``PostStartJob.outcome``.
"""

import logging
import threading
import time
from concurrent import futures
from typing import Iterator, List, Optional

from docker.models.containers import Container

from ..services.docker_service import DockerService
from .constants import POST_START_LOGGER, POST_START_SETTLE_DELAY

logger = logging.getLogger(__name__)
sink = logging.getLogger(POST_START_LOGGER)


class PostStartJob:
    """One post-start command, drained on its own daemon thread."""

    def __init__(
        self,
        service: str,
        container: Container,
        command: List[str],
        engine: DockerService,
        settle_delay: float = POST_START_SETTLE_DELAY,
    ):
        self.service = service
        self.container = container
        self.command = list(command)
        self.engine = engine
        self.settle_delay = settle_delay
        self.outcome: futures.Future = futures.Future()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> 'PostStartJob':
        """Wait the settle delay, launch the exec session and return.

        Blocks for the settle delay. A failure to launch is recorded on
        ``outcome`` and logged, never raised.
        """
        self.outcome.set_running_or_notify_cancel()
        if self.settle_delay > 0:
            logger.info(f"Waiting {self.settle_delay}s before post-start command of {self.service}")
            time.sleep(self.settle_delay)

        logger.info(f"Running post-start command for {self.service}: {' '.join(self.command)}")
        try:
            exec_id, output = self.engine.exec_in_container(self.container, self.command)
        except Exception as e:
            self._fail(e)
            return self

        self._thread = threading.Thread(
            target=self._drain,
            args=(exec_id, output),
            name=f"post-start-{self.service}",
            daemon=True,
        )
        self._thread.start()
        return self

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait until the command's outcome is known."""
        futures.wait([self.outcome], timeout=timeout)

    def _fail(self, error: Exception):
        sink.error(f"[{self.service}] post-start command failed: {error}")
        self.outcome.set_exception(error)

    def _drain(self, exec_id: str, output: Iterator):
        try:
            exit_code = self._stream(exec_id, output)
        except Exception as e:
            self._fail(e)
        else:
            self.outcome.set_result(exit_code)

    def _stream(self, exec_id: str, output: Iterator) -> Optional[int]:
        for chunk in output:
            text = chunk.decode('utf-8', errors='replace') if isinstance(chunk, bytes) else str(chunk)
            for line in text.splitlines():
                if line.strip():
                    sink.info(f"[{self.service}] {line}")

        exit_code = self.engine.exec_exit_code(exec_id)
        if exit_code:
            sink.warning(f"[{self.service}] '{' '.join(self.command)}' exited with code {exit_code}")
        else:
            sink.info(f"[{self.service}] '{' '.join(self.command)}' completed")
        return exit_code
