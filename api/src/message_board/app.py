from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from message_board import __version__
from message_board.routes import messages
from message_board.utils.logger import configure_logging, log

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

configure_logging()

app = FastAPI(
    title="Message Board API",
    description="Public government message board",
    version=__version__,
    redirect_slashes=False,
)


# CORS Middleware: every response carries the headers, preflight never reaches a route
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    if request.method == "OPTIONS":
        response = Response(status_code=204)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods on known paths look the same to clients
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


# Global Exception Handler
@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    log("error", "System", f"Internal server error: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=CORS_HEADERS,
    )


# Routers
app.include_router(messages.router)


@app.on_event("startup")
async def startup_event():
    """Log application startup"""
    log("info", "System", "Message Board API started")


@app.on_event("shutdown")
async def shutdown_event():
    """Log application shutdown"""
    log("info", "System", "Message Board API shutting down")
