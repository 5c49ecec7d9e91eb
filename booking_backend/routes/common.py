import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Annotated

from fastapi import HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = 'Request failed'


def number_as_text(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _coerce_text(value):
    # Scalars are stored as their text form, the way the front end's store casts them.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return number_as_text(value)
    return value


def _utc_isoformat(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat().replace('+00:00', 'Z')


Text = Annotated[str | None, BeforeValidator(_coerce_text)]
UtcDateTime = Annotated[datetime, PlainSerializer(_utc_isoformat, return_type=str, when_used='json')]


class ApiModel(BaseModel):
    """Base for request and response bodies, exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(ApiModel):
    message: str


def failure_message(message: str) -> Callable:
    """Attach the generic 500 message a route answers with, including for unreadable bodies."""

    def decorate(endpoint: Callable) -> Callable:
        endpoint.failure_message = message
        return endpoint

    return decorate


class GenericErrorRoute(APIRoute):
    """Answers request bodies that fail validation with the route's generic 500."""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()
        message = getattr(self.endpoint, 'failure_message', DEFAULT_FAILURE_MESSAGE)

        async def custom_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError as exc:
                logger.error('Rejected request body for %s: %s', request.url.path, exc.errors())
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=message,
                ) from exc

        return custom_route_handler


def parse_datetime(value: str | None, field_name: str) -> datetime:
    """Parse an ISO date or date-time, returned as naive UTC."""
    if value is None or not str(value).strip():
        raise ValueError(f'{field_name} is required.')

    try:
        parsed = datetime.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise ValueError(f'{field_name} is not a valid date: {value!r}') from exc

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def price_as_text(price: str | int | float | None) -> str:
    if price is None:
        raise ValueError('price is required.')

    text = _coerce_text(price)
    return text if isinstance(text, str) else str(text)


def price_as_number(price: str | int | float | None) -> float | None:
    if price is None:
        return None

    try:
        return float(str(price).strip()) if isinstance(price, str) else float(price)
    except ValueError as exc:
        raise ValueError(f'price is not a number: {price!r}') from exc
