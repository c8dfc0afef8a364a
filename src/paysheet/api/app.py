"""FastAPI application with lifespan, error mapping and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paysheet.api.routes import health, payments, purchases, salaries
from paysheet.core.config import AppSettings
from paysheet.core.exceptions import PaysheetError
from paysheet.core.logging import configure_logging
from paysheet.persistence import create_holiday_calendar
from paysheet.services.salary_service import SalaryService


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings = AppSettings()
    configure_logging(settings)
    app.state.settings = settings
    app.state.salary_service = SalaryService(settings=settings, holidays=create_holiday_calendar())
    yield


async def paysheet_error_handler(request: Request, exc: PaysheetError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"message": str(exc)})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Paysheet Attendance Pay Calculator",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(PaysheetError, paysheet_error_handler)
    app.include_router(health.router)
    app.include_router(salaries.router, prefix="/salaries")
    app.include_router(salaries.structure_router, prefix="/payment-structure")
    app.include_router(payments.router, prefix="/payments")
    app.include_router(purchases.router, prefix="/purchases")
    return app
