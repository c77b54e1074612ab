from unittest.mock import AsyncMock

import pytest

from controllers.products import ProductsController
from models.product import Product
from repository.base import Repository


@pytest.fixture
def products():
    return [
        Product(id=1, name="Pen", price=100, stock=50, color="Red"),
        Product(id=2, name="Notebook", price=200, stock=500, color="Blue"),
    ]


@pytest.fixture
def mock_repo():
    """A repository whose every method is an AsyncMock."""
    return AsyncMock(spec=Repository)


@pytest.fixture
def controller(mock_repo):
    return ProductsController(mock_repo)
