# backend/automarker/utils.py
import logging
import sys
from typing import Any, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, format_string: Optional[str] = None) -> None:
    """Configure root logging once for the service (stdout handler)."""
    logging.basicConfig(
        level=level,
        format=format_string or LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def clamp_text(value: Any, max_chars: int = 6000) -> str:
    # falsy values (None, "", 0) become "", everything else is stringified
    return str(value or "")[:max_chars]
