"""
HTTP application exposing shell sessions.
"""

import logging

from fastapi import FastAPI

from minishell.api.routers import router as api_router
from minishell.config.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(title="minishell API")
app.include_router(api_router)
