"""
Cloud Spanner emulator lifecycle.

``EmulatorRunner`` starts the emulator Docker image through testcontainers,
publishes its gRPC port on the configured host port and blocks until the
emulator reports that it accepts requests. ``stop()`` removes the container
again and is safe to call when nothing was started, so callers can put it in
a ``finally`` block unconditionally.
"""

from __future__ import annotations

from typing import Callable, Optional

from testcontainers.core.container import DockerContainer
from testcontainers.core.waiting_utils import wait_for_logs

from spanner_orm_tutorial.core.config import EmulatorConfig
from spanner_orm_tutorial.core.logging_config import get_logger
from spanner_orm_tutorial.errors import EmulatorStartError

logger = get_logger(__name__)

# Port of the emulator's gRPC endpoint inside the container
EMULATOR_GRPC_PORT = 9010

# Log line printed by the emulator once the gRPC server is up
READY_LOG_PATTERN = "gRPC server listening"


class EmulatorRunner:
    """Start and stop a local Cloud Spanner emulator.

    Args:
        config: Emulator settings (image, address, readiness timeout, managed flag)
        container_factory: Callable building the container from an image name
    """

    def __init__(
        self,
        config: EmulatorConfig,
        container_factory: Callable[[str], DockerContainer] = DockerContainer,
    ) -> None:
        self.config = config
        self._container_factory = container_factory
        self._container: Optional[DockerContainer] = None

    @property
    def is_running(self) -> bool:
        return self._container is not None

    def start(self) -> None:
        """Start the emulator and wait until it is ready.

        Raises:
            EmulatorStartError: The container could not be started or did not
                report readiness within ``startup_timeout`` seconds.
        """
        if not self.config.managed:
            logger.info(f"Using externally managed emulator at {self.config.host}")
            return
        if self._container is not None:
            return

        logger.info(f"Starting emulator {self.config.image} on {self.config.host}...")
        container = self._container_factory(self.config.image).with_bind_ports(
            EMULATOR_GRPC_PORT, self.config.port
        )
        try:
            container.start()
        except Exception as exc:
            raise EmulatorStartError(self.config.image, str(exc)) from exc

        # Tracked before waiting so stop() also cleans up a container that never became ready
        self._container = container
        try:
            wait_for_logs(container, READY_LOG_PATTERN, timeout=self.config.startup_timeout)
        except Exception as exc:
            raise EmulatorStartError(self.config.image, f"not ready: {exc}") from exc
        logger.info("Emulator is ready")

    def stop(self) -> None:
        """Stop the emulator container and release it."""
        if self._container is None:
            return
        container, self._container = self._container, None
        logger.info("Stopping emulator...")
        container.stop()

    def __enter__(self) -> "EmulatorRunner":
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()
