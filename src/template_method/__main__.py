"""Demo driver: ``python -m template_method``."""

import sys

from template_method.core.settings import get_settings
from template_method.framework.client import run_demo
from template_method.framework.logging import configure_logging


def main() -> int:
    settings = get_settings()
    configure_logging(level=settings.log_level, format=settings.log_format)
    run_demo(settings.demo_variants)
    return 0


if __name__ == "__main__":
    sys.exit(main())
