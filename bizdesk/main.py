import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from bizdesk.core.config import settings
from bizdesk.core.errors import ApiError, FormErrors, ResourceNotFound
from bizdesk.core.middleware import AuditMiddleware
from bizdesk.api import activity_logs, branches, context, expenses, health, modules, schedules

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)
app.add_middleware(AuditMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(context.router)
app.include_router(activity_logs.router)
app.include_router(branches.router)
app.include_router(expenses.router)
app.include_router(schedules.router)
for module_router in modules.routers:
    app.include_router(module_router)


@app.exception_handler(FormErrors)
async def form_errors_handler(request: Request, exc: FormErrors):
    return JSONResponse(status_code=422, content={"errors": exc.errors})


@app.exception_handler(ResourceNotFound)
async def not_found_handler(request: Request, exc: ResourceNotFound):
    return JSONResponse(status_code=404, content={"errors": {"general": exc.message}})


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    status = exc.status or 502
    logger.error(f"Upstream error on {request.method} {request.url.path}: {status}")
    return JSONResponse(status_code=status, content={"errors": {"general": exc.message or str(exc)}})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
