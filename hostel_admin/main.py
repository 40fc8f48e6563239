from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from hostel_admin.admin.routes import router as admin_router
from hostel_admin.database.mongo_connection import connect_to_mongo, close_mongo_connection, mongodb
from hostel_admin.database.create_indexes import create_indexes
from hostel_admin.config import get_settings
from hostel_admin.core.exceptions import APIException
from hostel_admin.core.middleware import LoggingMiddleware
from hostel_admin.utils.helpers import create_error_response

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    await create_indexes(mongodb.database)
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(
    title=settings["PROJECT_NAME"],
    description="Admin account management for the hostel management system",
    version=settings["VERSION"],
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.message, exc.errors)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # ctx may hold the raised ValueError, which is not JSON serializable
    errors = [
        {
            "msg": error["msg"],
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "type": error["type"]
        }
        for error in exc.errors()
    ]
    logger.warning(f"Rejected request body for {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content=create_error_response("Invalid request", errors)
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=500, content=create_error_response("Server error"))


app.include_router(admin_router, prefix=settings["API_PREFIX"])

@app.get("/")
async def root():
    return {
        "message": "Hostel Admin API is running!",
        "version": settings["VERSION"],
        "status": "healthy"
    }

@app.get("/health")
async def health_check():
    """API health check endpoint"""
    return {
        "status": "healthy",
        "message": "Hostel Admin API is running",
        "version": settings["VERSION"]
    }

@app.get("/health/db")
async def database_health_check():
    """Database health check endpoint"""
    from hostel_admin.database.mongo_connection import MongoConnectionManager
    try:
        manager = MongoConnectionManager()
        health_status = await manager.health_check()
        return health_status
    except Exception as e:
        return {
            "status": "unhealthy",
            "message": "Database connection failed",
            "error": str(e)
        }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hostel_admin.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings["DEBUG"]
    )
