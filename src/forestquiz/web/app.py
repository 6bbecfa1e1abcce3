from __future__ import annotations

import os
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from ..core.settings import MAX_TREES, MIN_TREES, QuizSettings
from ..features.session import SessionManager, create_session_routers

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

app = FastAPI(title="Random Forest Quiz")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
_manager = SessionManager()
_router_v1, _router_legacy = create_session_routers(_manager, templates)


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(request: Request) -> Response:
    settings = QuizSettings.from_env()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "request": request,
            "default_trees": settings.default_trees,
            "min_trees": MIN_TREES,
            "max_trees": MAX_TREES,
        },
    )


app.include_router(_router_v1)
app.include_router(_router_legacy)


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    host = os.environ.get("BIND", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host=host, port=port, factory=False)


if __name__ == "__main__":  # pragma: no cover
    main()
