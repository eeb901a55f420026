"""Listener setup and process entry point."""

import logging
import socket
import sys

import uvicorn

from service2.config import Settings, settings as default_settings
from service2.main import app

logger = logging.getLogger(__name__)


class ListenerBindError(OSError):
    """The configured host/port could not be bound."""

    def __init__(self, host: str, port: int, cause: OSError):
        super().__init__(f"Cannot listen on {host}:{port}: {cause}")
        self.host = host
        self.port = port
        self.cause = cause


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on ``host:port``, raising ListenerBindError on failure."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError as e:
        sock.close()
        raise ListenerBindError(host, port, e) from e
    sock.set_inheritable(True)
    return sock


def serve(settings: Settings) -> None:
    """Bind the listener and block serving requests until the process is killed."""
    sock = bind_listener(settings.host, settings.port)
    # PORT=0 lets the OS pick; report what was actually bound
    port = sock.getsockname()[1]
    logger.info(f"{settings.service_name} is running at http://localhost:{port}")

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=port,
        log_level=settings.log_level,
        access_log=False,
    )
    uvicorn.Server(config).run(sockets=[sock])


def main(settings: Settings | None = None) -> None:
    settings = settings or default_settings
    try:
        serve(settings)
    except ListenerBindError as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)
