import logging

# Project logger (level and handlers come from logging_config)
logger = logging.getLogger("weathermood")


def log_section(title: str) -> None:
    """
    Log a top-level section header.
    """
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    Action step / attempt in progress.
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Non-fatal problem (e.g. a retrieval strategy that failed).
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    logger.error("❌ %s", message)
