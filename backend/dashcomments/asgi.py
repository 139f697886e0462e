"""
ASGI entry point: production wiring (Prisma-backed container).

    uvicorn dashcomments.asgi:app --host 0.0.0.0 --port 5001
"""

from dashcomments.config.logging_config import setup_logging
from dashcomments.config.settings import Config
from dashcomments.fastapi_app import create_fastapi_app
from dashcomments.setup.ioc import create_container

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

# Create container at module level (before app starts)
container = create_container()
app = create_fastapi_app(container)
