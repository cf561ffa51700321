import logging
import os


def setup_logging(default: int = logging.INFO) -> None:
    """Installs a console handler unless the host application already has one.

    ``STC_LOG_LEVEL`` (e.g. ``debug``) overrides ``default``.
    """
    if logging.getLogger().handlers:
        return
    level = logging.getLevelName(os.environ.get("STC_LOG_LEVEL", "").strip().upper())
    logging.basicConfig(level=level if isinstance(level, int) else default,
                        format="[%(levelname)s] %(name)s: %(message)s")
