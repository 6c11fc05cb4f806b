"""Command-line entry point that pages the bundled guide."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from module_best_practices.config import settings
from module_best_practices.emitter import display
from module_best_practices.errors import DocumentError

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level)
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        logger.debug("Ignoring arguments: %s", " ".join(args))
    try:
        display()
    except DocumentError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
