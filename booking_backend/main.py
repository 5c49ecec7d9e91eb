import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from booking_backend.core import config
from booking_backend.database import Base, engine
from booking_backend.models import appointment, availability, contact, patient, pricing, profile, user, user_profile  # noqa: F401
from booking_backend.routes import (
    appointment_routes,
    contact_routes,
    patient_routes,
    profile_routes,
    user_routes,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

config.validate_runtime_config()

app = FastAPI(title='Doctor Appointment API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=config.CORS_ALLOW_CREDENTIALS,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.exception_handler(StarletteHTTPException)
async def render_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={'error': exc.detail},
        headers=getattr(exc, 'headers', None),
    )


@app.on_event('startup')
def initialize_database() -> None:
    try:
        Base.metadata.create_all(bind=engine)
        logger.info('Connected to the database (%d tables registered)', len(Base.metadata.tables))
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.get('/')
def root():
    return {'status': 'Doctor Appointment API Running'}


app.include_router(user_routes.router, prefix='/api')
app.include_router(profile_routes.router, prefix='/api')
app.include_router(patient_routes.router, prefix='/api')
app.include_router(appointment_routes.router, prefix='/api')
app.include_router(contact_routes.router, prefix='/api')


if __name__ == '__main__':
    import uvicorn

    logger.info('Server running at http://%s:%d', config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
