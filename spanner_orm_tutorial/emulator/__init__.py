"""Local Cloud Spanner emulator lifecycle management."""

from .runner import EMULATOR_GRPC_PORT, READY_LOG_PATTERN, EmulatorRunner

__all__ = ["EMULATOR_GRPC_PORT", "READY_LOG_PATTERN", "EmulatorRunner"]
