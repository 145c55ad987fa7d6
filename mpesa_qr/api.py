"""FastAPI application for mpesa-qr."""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from .config import DEFAULT_API_KEY, settings
from .logging_conf import configure_logging
from .middleware import RequestLoggingMiddleware
from .models import PaymentType
from .monitoring import metrics_payload, record_payload, record_service_error
from .mpesa_encoder import inspect_payload
from .schemas import (
    GenerateQRRequest,
    GenerateQRResponse,
    InspectRequest,
    InspectResponse,
    PaymentTypeEnum,
    TLVField,
)
from .services.errors import ServiceError, err_bad_payload
from .services.generator import build_payload
from .tlv import TLVItem

app = FastAPI(title="mpesa-qr", version="0.1.0")
app.add_middleware(RequestLoggingMiddleware)

logger = logging.getLogger("mpesa_qr.api")


def _warn_insecure_defaults() -> None:
    if settings.api_key == DEFAULT_API_KEY:
        logger.warning(
            "api key uses the default value",
            extra={"config_key": "api_key", "environment": settings.environment},
        )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    _warn_insecure_defaults()


async def require_api_key(x_api_key: str = Header(...)) -> None:
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    return route.path if route else request.url.path


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    route_path = _route_path(request)
    logger.warning(
        "service error",
        extra={"code": exc.code, "path": route_path, "method": request.method},
    )
    record_service_error(exc.code, route_path)
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "message": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled exception",
        extra={"path": _route_path(request), "method": request.method},
    )
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "message": "Internal server error"})


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
async def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.post("/v1/qr", response_model=GenerateQRResponse, tags=["qr"], dependencies=[Depends(require_api_key)])
async def generate_qr(payload: GenerateQRRequest) -> GenerateQRResponse:
    payment_type = PaymentType(payload.payment_type.value)
    result = build_payload(
        payment_type,
        payload.number,
        account_number=payload.account_number,
        business_name=payload.business_name,
    )
    encoded = result.unwrap()
    record_payload(payment_type.value)

    return GenerateQRResponse(
        payment_type=PaymentTypeEnum(payment_type.value),
        number=result.target.identifier,
        payload=encoded.payload,
        crc=encoded.crc,
    )


def _field(item: TLVItem) -> TLVField:
    return TLVField(tag=item.tag, length=len(item.value), value=item.value)


@app.post("/v1/qr/inspect", response_model=InspectResponse, tags=["qr"], dependencies=[Depends(require_api_key)])
async def inspect_qr(payload: InspectRequest) -> InspectResponse:
    try:
        decoded = inspect_payload(payload.payload)
    except ValueError as exc:
        raise err_bad_payload(str(exc)) from exc

    return InspectResponse(
        fields=[_field(item) for item in decoded.items],
        merchant_account=[_field(item) for item in decoded.merchant_account],
        crc=decoded.crc,
        computed_crc=decoded.computed_crc,
        checksum_valid=decoded.checksum_valid,
    )
