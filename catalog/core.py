"""Dependency injection container wiring the catalog handlers and dispatcher."""

from dependency_injector import containers, providers

from catalog.application.catalog.commands.create_product import (
    CreateProductCommand,
    CreateProductHandler,
)
from catalog.application.catalog.queries.get_product_by_id import (
    GetProductByIdHandler,
    GetProductByIdQuery,
)
from catalog.application.common.dispatcher import Dispatcher
from catalog.database import get_session_factory
from catalog.infrastructure.catalog.repositories import ProductRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Resolved lazily so the database can be initialized after import
    session_factory = providers.Callable(get_session_factory)

    # Repositories
    product_repository = providers.Singleton(ProductRepository, session_factory=session_factory)

    # Catalog module, request handlers
    create_product_handler = providers.Singleton(
        CreateProductHandler,
        product_repository=product_repository,
    )
    get_product_by_id_handler = providers.Singleton(
        GetProductByIdHandler,
        product_repository=product_repository,
    )

    # One handler per request type
    dispatcher = providers.Singleton(
        Dispatcher,
        handlers=providers.Dict(
            {
                CreateProductCommand: create_product_handler,
                GetProductByIdQuery: get_product_by_id_handler,
            }
        ),
    )


container = Container()
