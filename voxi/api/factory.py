from voxi.config import AppConfig, CONFIG
from voxi.utils import get_logger
from .interface import InsightSource
from .http_client import HttpInsightClient
from .mock_client import MockInsightClient

logger = get_logger(__name__)

def make_client(config: AppConfig = None) -> InsightSource:
    config = config or CONFIG
    if config.use_api == "http":
        logger.info(f"Using analytics service at {config.api_base_url}")
        return HttpInsightClient(config.api_base_url, timeout=config.request_timeout)
    if config.use_api != "mock":
        logger.warning(f"Insight source '{config.use_api}' not implemented, using Mock.")
    return MockInsightClient()
