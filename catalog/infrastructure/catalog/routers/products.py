"""API routes for product management."""

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from catalog.application.catalog.commands.create_product import CreateProductCommand
from catalog.application.catalog.queries.get_product_by_id import GetProductByIdQuery
from catalog.config import GENERIC_ERROR_MESSAGE, Settings
from catalog.domain.common.exceptions import DomainError
from catalog.infrastructure.catalog.schemas import (
    ProductCreateRequest,
    ProductResponse,
    ProductSchema,
)
from catalog.infrastructure.common.di import DispatcherDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def error_message(error: BaseException, settings: Settings) -> str:
    """
    Text placed in a failure envelope.

    Domain errors (such as a missing product) are always shown; other
    errors are replaced by a generic message unless EXPOSE_ERROR_DETAILS
    is enabled.
    """
    cause = getattr(error, "cause", error)
    if settings.EXPOSE_ERROR_DETAILS or isinstance(cause, DomainError):
        return str(error)
    return GENERIC_ERROR_MESSAGE


def failure_response(status_code: int, message: str) -> JSONResponse:
    """Serialize a failure envelope with the given status code."""
    envelope = ProductResponse.failure(message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ProductResponse}},
)
def create_product(
    body: ProductCreateRequest,
    request: Request,
    response: Response,
    dispatcher: DispatcherDep,
    settings: SettingsDep,
) -> ProductResponse | JSONResponse:
    """
    Create a product.

    Args:
        body: Name, description and price of the new product
        dispatcher: Routes the command to its handler

    Returns:
        201 with the created product and a Location header pointing at it,
        or 500 with a failure envelope
    """
    try:
        result = dispatcher.send(CreateProductCommand(product=body.to_input()))
    except Exception as e:
        logger.error(f"Failed to create product: {e!s}", exc_info=True)
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, error_message(e, settings)
        )

    if result.is_failure:
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_message(result.unwrap_error(), settings),
        )

    envelope = ProductResponse.from_result(result, ProductSchema.from_entity)
    response.headers["Location"] = str(
        request.url_for("get_product_by_id", product_id=envelope.data.id)  # type: ignore[union-attr]
    )
    return envelope


@router.get(
    "/{product_id}",
    name="get_product_by_id",
    response_model=ProductResponse,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ProductResponse}},
)
def get_product_by_id(
    product_id: int,
    dispatcher: DispatcherDep,
    settings: SettingsDep,
) -> ProductResponse | JSONResponse:
    """
    Get a product by ID.

    Every failure, a missing product included, is answered with 400.

    Args:
        product_id: ID of the product
        dispatcher: Routes the query to its handler

    Returns:
        200 with the product, or 400 with a failure envelope
    """
    try:
        result = dispatcher.send(GetProductByIdQuery(product_id=product_id))
    except Exception as e:
        logger.error(f"Failed to fetch product {product_id}: {e!s}", exc_info=True)
        return failure_response(status.HTTP_400_BAD_REQUEST, error_message(e, settings))

    if result.is_failure:
        return failure_response(
            status.HTTP_400_BAD_REQUEST, error_message(result.unwrap_error(), settings)
        )

    return ProductResponse.from_result(result, ProductSchema.from_entity)
