from contextlib import asynccontextmanager

from fastapi import FastAPI

from lottery.api.errors import register_exception_handlers
from lottery.api.routes import ping, tickets
from lottery.core.config import Settings, get_settings
from lottery.core.logging import configure_logging, init_tracer, shutdown_tracer
from lottery.tickets.repository import TicketRepository
from lottery.tickets.service import TicketService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger = configure_logging(settings)
    tracer_provider = init_tracer(settings)
    app.state.tracer_provider = tracer_provider
    logger.info("Starting %s", settings.app_name)
    try:
        yield
    finally:
        shutdown_tracer(tracer_provider)
        logger.info("Stopped %s", settings.app_name)


def build_ticket_service(settings: Settings) -> TicketService:
    repository = TicketRepository(id_min=settings.ticket_id_min, id_max=settings.ticket_id_max)
    return TicketService(repository)


def create_app(ticket_service: TicketService | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.ticket_service = ticket_service or build_ticket_service(settings)
    register_exception_handlers(app)
    app.include_router(ping.router)
    app.include_router(tickets.router)
    return app


app = create_app()
