"""Entry point for the expression editor.

Run:

    python -m expression_editor

Set EXPRESSION_EDITOR_LOG_LEVEL=DEBUG to see every selection and write.
"""

import logging
import os

LOG_LEVEL_ENV = "EXPRESSION_EDITOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def main() -> None:
    configure_logging()
    # Imported late so configure_logging works without a display
    from expression_editor.gui import run

    run()


if __name__ == "__main__":
    main()
