"""
Main FastAPI application for the blogql server
"""

from ..config import settings
from ..logging import configure_logging
from .factory import create_app

# Configure logging before the app logs its startup
configure_logging(debug=settings.debug)

# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blogql.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
