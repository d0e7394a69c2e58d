import logging

from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO, *, force: bool = False) -> None:
    """Route log records through rich and quiet the httpx request logger."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler()],
        force=force,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
