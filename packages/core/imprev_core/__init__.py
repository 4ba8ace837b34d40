"""Core app services: settings, logging, terminal access, and the resize render loop."""

from .config import AppConfig, load_config
from .logging_setup import configure_logging, get_logger, install_crash_hooks
from .resize_controller import ControllerState, RenderStatus, ResizeController
from .terminal import ResizeEvent, ResizeNotifier, query_terminal_size

__all__ = [
    "AppConfig",
    "ControllerState",
    "RenderStatus",
    "ResizeController",
    "ResizeEvent",
    "ResizeNotifier",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "load_config",
    "query_terminal_size",
]
