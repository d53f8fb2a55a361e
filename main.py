# main.py
import asyncio
import logging
import uvicorn
from storefront.config import Config, setup_logging
from storefront.web import create_app

async def main():
    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        app = create_app()
        server = uvicorn.Server(uvicorn.Config(
            app,
            host=Config.HOST,
            port=Config.PORT,
            log_config=None
        ))
        logger.info(f"Starting server at http://localhost:{Config.PORT}")
        await server.serve()
    except Exception as e:
        logger.error(f"Error starting server: {e}", exc_info=True)
        raise

if __name__ == "__main__":
    asyncio.run(main())
