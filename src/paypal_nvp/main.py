"""Main FastAPI application entry point."""

from paypal_nvp.core.app import configure_logging, create_app
from paypal_nvp.core.config import get_cached_settings

settings = get_cached_settings()

# Configure logging
configure_logging(settings)

# Create the application instance
app = create_app(settings=settings)

def main():
    """CLI entry point for running the health endpoint."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
