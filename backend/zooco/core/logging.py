from logging import basicConfig, getLogger

from zooco.config import settings

basicConfig(level=settings.log_level)
logger = getLogger("zooco")
logger.setLevel(settings.log_level)
