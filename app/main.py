# app/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from routes import products, departments, categories
from database.config import get_settings
from services.exceptions import CatalogError
from schemas.catalog import ErrorDetail, ErrorResponse
import logging

# Получаем настройки
settings = get_settings()

# Настройка логирования
logging.basicConfig(
    level=logging.INFO if settings.DEBUG else logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Отключаем избыточные логи SQLAlchemy если не в режиме отладки
if not settings.DEBUG:
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# Создаем приложение
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.API_VERSION
)

# Настройка CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(products)
app.include_router(departments)
app.include_router(categories)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Ошибки каталога -> {"error": {...}}"""
    body = ErrorResponse(error=ErrorDetail(**exc.to_dict()))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    field = None
    if errors and errors[0].get("loc"):
        field = str(errors[0]["loc"][-1])
    body = {"status": 400, "code": "REQ_01", "message": "invalid request parameters"}
    if field:
        body["field"] = field
    return JSONResponse(status_code=400, content={"error": body})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Непредвиденные ошибки (в том числе ошибки БД)"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": {"status": 500, "message": "Internal Server Error"}}
    )


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {"message": "Welcome to Catalog API"}


@app.get("/health")
async def health_check():
    """Проверка здоровья сервиса"""
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event():
    """Инициализация при запуске"""
    logger.info("Starting Catalog API...")

    if settings.INIT_DB_ON_STARTUP:
        from database.init_db import init_db

        init_db(data_dir=settings.SEED_DATA_DIR)
