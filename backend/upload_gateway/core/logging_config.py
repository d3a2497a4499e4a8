import logging

from upload_gateway.core.config import DEFAULT_PUBLIC_BASE_URL, Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("upload_gateway")


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(format=LOG_FORMAT, level=level)


def log_configuration(settings: Settings) -> None:
    """Report which store settings are present without leaking their values."""

    def mark(value: object) -> str:
        return "set" if value else "MISSING"

    logger.info("Upload gateway listening on port %d", settings.port)
    logger.info("R2_ENDPOINT: %s", mark(settings.store_endpoint))
    logger.info("AWS_ACCESS_KEY_ID: %s", mark(settings.access_key_id))
    logger.info("AWS_SECRET_ACCESS_KEY: %s", mark(settings.secret_access_key))
    logger.info("R2_BUCKET: %s", settings.bucket)
    if settings.public_base_url:
        logger.info("R2_PUBLIC_URL: %s", settings.public_base_url)
    else:
        logger.info("R2_PUBLIC_URL: using fallback %s", DEFAULT_PUBLIC_BASE_URL)
