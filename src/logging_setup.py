from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

_APP_LOGGER_PREFIXES = ("src.", "app", "__main__")


class _ThirdPartyNoiseFilter(logging.Filter):
    """
    Keep our own records, but only let third-party loggers (streamlit, httpx,
    openai, watchdog) through at WARNING and above.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(_APP_LOGGER_PREFIXES):
            return True
        return record.levelno >= logging.WARNING


def _level_from_name(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure root logging with a stderr handler and, when ``log_dir`` is set,
    a file handler writing ``infoco.log``.

    Streamlit reruns the script on every interaction, so this replaces any
    handlers installed by a previous run instead of stacking new ones.
    """
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    for h in list(root.handlers):
        if getattr(h, "_infoco_handler", False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyNoiseFilter())
    ch._infoco_handler = True  # type: ignore[attr-defined]
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "infoco.log"), encoding="utf-8")
        fh.setFormatter(fmt)
        fh._infoco_handler = True  # type: ignore[attr-defined]
        root.addHandler(fh)

    logging.captureWarnings(True)
