import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging import configure_logging
from .api.routes.health import router as health_router
from .api.routes.charts import router as charts_router, preview_router
from .api.routes.samples import router as samples_router
from .repositories.chart_repository import ChartRepository, InMemoryChartRepository


log = logging.getLogger("chartboard.main")


def create_app(repository: ChartRepository | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title="Chartboard API", version="0.1.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    if repository is None:
        repository = InMemoryChartRepository(seed=settings.seed_sample_chart)
    app.state.chart_repository = repository
    log.info("Chart store ready with %d chart(s)", len(repository.list()))

    app.include_router(health_router, prefix=settings.api_prefix, tags=["health"])
    app.include_router(charts_router, prefix=settings.api_prefix, tags=["charts"])
    app.include_router(preview_router, prefix=settings.api_prefix, tags=["charts"])
    app.include_router(samples_router, prefix=settings.api_prefix, tags=["samples"])

    return app


app = create_app()
