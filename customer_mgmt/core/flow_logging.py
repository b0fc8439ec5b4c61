import logging

from customer_mgmt.core.config import settings


def _category_enabled(category: str | None) -> bool:
    if not settings.FLOW_LOGS_ENABLED:
        return False
    if category == "repository":
        return settings.FLOW_LOGS_REPOSITORY_ENABLED
    if category == "statistics":
        return settings.FLOW_LOGS_STATISTICS_ENABLED
    return True


def flow_info(
    logger: logging.Logger,
    msg: str,
    *args,
    category: str | None = None,
    **kwargs,
) -> None:
    if _category_enabled(category):
        logger.info(msg, *args, **kwargs)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
