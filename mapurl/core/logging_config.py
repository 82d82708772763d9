import logging
import sys

from mapurl.core.config import settings

def setup_logging():
    """
    Configure logging for the application.
    
    Sets up logging to stdout with the level taken from settings.
    Works the same when the encoder is embedded as a library or served over HTTP.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    
    # Uvicorn access logs repeat every request line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    
    return logging.getLogger("mapurl")


# Create global logger instance
logger = setup_logging()
