import logging
from typing import Union

DEFAULT_FORMAT = "[%(levelname)s] %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str] = logging.INFO, *, fmt: str = DEFAULT_FORMAT) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    resolved = _resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=fmt)
