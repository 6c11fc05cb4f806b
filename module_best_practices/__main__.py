"""Allow ``python -m module_best_practices``."""

from module_best_practices.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
