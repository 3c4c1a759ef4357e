"""FastAPI app exposing the date conversion endpoints."""

import uvicorn
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.dateconv.core.config import DateAPIConfig
from src.dateconv.core.errors import DateConversionError
from src.dateconv.core.logging_utils import configure_logging

from .service import DateAPIService

CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _first_query_value(request: Request, name: str) -> str | None:
    # Repeated parameters resolve to their first occurrence.
    values = request.query_params.getlist(name)
    return values[0] if values else None


def create_app(service: DateAPIService | None = None, config: DateAPIConfig | None = None) -> FastAPI:
    config = config or DateAPIConfig.from_env()
    app = FastAPI(title="Date Convert API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.origins(),
        allow_credentials=False,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
    )
    app.state.date_service = service

    def get_service() -> DateAPIService:
        if app.state.date_service is None:
            app.state.date_service = DateAPIService()
        return app.state.date_service

    @app.exception_handler(DateConversionError)
    async def conversion_error(request: Request, exc: DateConversionError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=400)

    @app.get("/convert", response_class=PlainTextResponse)
    def convert(request: Request, date_service: DateAPIService = Depends(get_service)) -> str:
        return date_service.convert(_first_query_value(request, "date"), _first_query_value(request, "hour"))

    @app.get("/api", response_class=PlainTextResponse)
    def usage(date_service: DateAPIService = Depends(get_service)) -> str:
        return date_service.usage()

    return app


app = create_app()


def main() -> int:
    load_dotenv()
    config = DateAPIConfig.from_env()
    configure_logging(config.log_level)
    uvicorn.run(
        create_app(config=config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
