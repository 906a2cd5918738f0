from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from database import Base, engine, get_settings
from api import players

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: 設定 log level，並在應用啟動時建立資料庫表
    logging.basicConfig(level=get_settings().log_level)
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title="Player Registry API",
    description="CRUD API for game player records with filtering, sorting and paging",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure this properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 格式錯誤（未知的 enum、非整數 id、分頁參數越界）一律回 400
    logger.warning(f"Rejected malformed request {request.method} {request.url.path}: {jsonable_errors(exc)}")
    return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})


# Include routers
app.include_router(players.router)


@app.get("/")
def root():
    return {"message": "Player Registry API", "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
