"""Entry point kept minimal by delegating to Engine."""

from config import LOG_LEVEL
from logging_config import setup_logging


def main():  # small wrapper for clarity / debuggers
    setup_logging(LOG_LEVEL)
    # Imported after logging is configured so startup messages are captured
    from core.engine import Engine

    Engine().run()


if __name__ == "__main__":
    main()
