from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from cadastro_obras.config import configure_logging
from cadastro_obras.presentation.api.metrics import registry
from cadastro_obras.presentation.api.routes.documentos import router as documentos_router
from cadastro_obras.presentation.api.routes.health import router as health_router

configure_logging()

app = FastAPI(title="Cadastro de Obras - validação de documentos", version="0.1.0")
app.include_router(health_router)
app.include_router(documentos_router)


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
