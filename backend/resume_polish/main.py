import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .ai_service import PolishService
from .api.routes_polish import router as polish_router
from .errors import ConfigMissing

logger = logging.getLogger(__name__)


def create_app(service: Optional[PolishService] = None) -> FastAPI:
    """Build the FastAPI app.

    Pass ``service`` to inject a ready PolishService (tests do); otherwise one
    is built from the environment on startup. A configuration failure leaves
    the app running, with the polish route answering 500 until restart.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.polish_init_error = None
        owned = None
        if service is not None:
            app.state.polish_service = service
        else:
            try:
                owned = PolishService.from_env()
            except ConfigMissing as e:
                logger.error(f"AI Service initialization failed: {e}")
                app.state.polish_init_error = e
            app.state.polish_service = owned
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()

    app = FastAPI(title="Resume Polish Backend", lifespan=lifespan)

    origins_env = os.getenv("CORS_ORIGINS")
    origins = [o.strip() for o in (origins_env or "").split(",") if o.strip()]
    if not origins:
        # Sensible default for local dev (Next.js 3000)
        origins = ["http://localhost:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(polish_router)
    return app


load_dotenv()
app = create_app()

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
