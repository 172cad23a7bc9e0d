from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Path, APIRouter, status
from fastapi.responses import JSONResponse

from slowapi import Limiter, _rate_limit_exceeded_handler, errors
from slowapi.util import get_remote_address

# Import core modules
import config
from core_logic import logger, ValidationException
from encoding import IDDecodeError, IDFormatError
from models import ObfuscatedID
from obfuscation import get_parameters
from schemas import EncodeRequest, EncodeResponse, DecodeRawRequest, DecodeResponse, ErrorResponse

# --- GLOBAL INSTANCES ---
limiter = Limiter(key_func=get_remote_address)

# --- LIFESPAN AND APP SETUP ---

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    config.config.validate()
    # Parameters are built before the first request; a corrupt prime table aborts startup.
    get_parameters()
    logger.info("Application started successfully")
    yield
    logger.info("Application shutdown complete")

# Main app instance
app = FastAPI(
    title="Obfuscated ID",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(errors.RateLimitExceeded, _rate_limit_exceeded_handler)


# --- ROUTERS DEFINITION (API) ---

api_router = APIRouter(prefix="/api/v1", tags=["API"])

@api_router.post("/ids", response_model=EncodeResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(config.RATE_LIMIT_ENCODE)
async def api_encode_id(request: Request, payload: EncodeRequest):
    """Obfuscate a raw sequential ID"""
    obfuscated_id = ObfuscatedID(payload.value)
    return EncodeResponse(id=obfuscated_id, encoded=obfuscated_id.encode())


@api_router.get(
    "/ids/{obfuscated_id}",
    response_model=DecodeResponse,
    responses={400: {"model": ErrorResponse}},
)
@limiter.limit(config.RATE_LIMIT_DECODE)
async def api_decode_id(
    request: Request,
    obfuscated_id: str = Path(..., description="The obfuscated ID in text form"),
):
    """Resolve an obfuscated ID back into its raw value"""
    try:
        parsed = ObfuscatedID.parse(obfuscated_id)
    except (IDDecodeError, IDFormatError) as e:
        logger.warning(f"Rejected obfuscated id {obfuscated_id!r}: {e}")
        raise ValidationException(str(e))
    return DecodeResponse(id=parsed, value=parsed.value())


@api_router.post("/ids/decode", response_model=DecodeResponse)
@limiter.limit(config.RATE_LIMIT_DECODE)
async def api_decode_raw(request: Request, payload: DecodeRawRequest):
    """Resolve an obfuscated 64-bit integer back into its raw value"""
    obfuscated_id = ObfuscatedID()
    obfuscated_id.decode(payload.encoded)
    return DecodeResponse(id=obfuscated_id, value=obfuscated_id.value())


app.include_router(api_router)


# --- HEALTH CHECK ---

@app.get("/health", include_in_schema=False)
async def health_check():
    return JSONResponse({"status": "ok"})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, log_level=config.LOG_LEVEL.lower())
