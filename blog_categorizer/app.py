import logging
import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blog_categorizer.core.config import AppSettings, FetcherSettings, InferenceSettings
from blog_categorizer.services import (
    ContentResolver,
    LLMCategorizer,
    LLMClient,
    PageFetcher,
    ReadabilityExtractor,
)
from blog_categorizer.api import init_exception_handlers, init_routers

settings = AppSettings()

# ---------------- Logging ----------------
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d] %(message)s",
)
logger = logging.getLogger()


# ---------------- FastAPI ----------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        app.state.settings = settings
        inference = InferenceSettings()
        inference.validate()

        # Initialize resolver (fetcher + readability extractor)
        app.state.resolver = ContentResolver(
            fetcher=PageFetcher(FetcherSettings()),
            extractor=ReadabilityExtractor(),
        )
        logger.info("ContentResolver initialized")

        # Initialize categorizer (inference API)
        app.state.categorizer = LLMCategorizer(LLMClient(inference))
        logger.info(f"LLMCategorizer initialized with model {inference.model}")

        app.state.running = True
        logger.info("Application started successfully")

    except Exception as e:
        app.state.running = False
        logger.exception("Application failed to initialize")
        raise e

    yield

    # Shutdown
    logger.info("Shutting down app...")

    # Close HTTP clients
    for name in ("resolver", "categorizer"):
        service = getattr(app.state, name, None)
        if service is None:
            continue
        try:
            await service.aclose()
            logger.info(f"Closed {name} client")
        except Exception as e:
            logger.warning(f"Error closing {name} client: {e}")


# ---------------- App Factory ----------------
app = FastAPI(title="Blog Categorizer", lifespan=lifespan)

# Routers
init_routers(app)
init_exception_handlers(app)


def main():
    uvicorn.run("blog_categorizer.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
