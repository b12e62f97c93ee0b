from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from cyclo.config import DEFAULT_OUTPUT_DIR
from cyclo.routers import analysis


def create_app(static_dir: Optional[Path] = None, root_path: Optional[Path] = None) -> FastAPI:
    app = FastAPI(
        title="cyclo",
        description="Complexity treemap for a source tree, plus the rendered viewer.",
        version="1.0.0"
    )
    app.state.root_path = Path(root_path) if root_path else None

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Local tool
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(analysis.router)

    @app.get("/api-status")
    async def root():
        return {"message": "cyclo server is running. Visit /docs for API documentation."}

    # Serve the rendered output (index.html + scripts/cyclo.js).
    # Only mount it when it exists so the API still works before a first render.
    static_dir = Path(static_dir) if static_dir else Path(DEFAULT_OUTPUT_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()
