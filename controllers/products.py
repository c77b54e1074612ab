# controllers/products.py
import logging
from typing import Optional

from controllers.results import ActionResult, NotFoundResult, RedirectToActionResult, ViewResult
from models.model_state import ModelState
from models.product import Product
from repository.base import Repository

logger = logging.getLogger(__name__)

INDEX = "Index"


class ProductsController:
    """CRUD actions over products.

    Each action is independent: it may query the repository, then picks
    one result kind. Missing products and invalid submissions come back
    as results, never as exceptions; repository errors propagate.
    """

    def __init__(self, repository: Repository[Product]):
        self._repository = repository

    async def index(self) -> ActionResult:
        products = await self._repository.get_all()
        return ViewResult("Index", products)

    async def details(self, id: Optional[int]) -> ActionResult:
        if id is None:
            return RedirectToActionResult(INDEX)

        product = await self._repository.get_by_id(id)
        if product is None:
            logger.debug(f"Details: product {id} not found")
            return NotFoundResult()
        return ViewResult("Details", product)

    def create(self) -> ActionResult:
        return ViewResult("Create")

    async def create_post(self, product: Product, model_state: Optional[ModelState] = None) -> ActionResult:
        model_state = model_state or ModelState()
        if not model_state.is_valid:
            return ViewResult("Create", product)

        await self._repository.create(product)
        logger.info(f"Created product '{product.name}'")
        return RedirectToActionResult(INDEX)

    async def edit(self, id: Optional[int]) -> ActionResult:
        if id is None:
            return RedirectToActionResult(INDEX)

        product = await self._repository.get_by_id(id)
        if product is None:
            logger.debug(f"Edit: product {id} not found")
            return NotFoundResult()
        return ViewResult("Edit", product)

    async def edit_post(self, id: int, product: Product, model_state: Optional[ModelState] = None) -> ActionResult:
        if id != product.id:
            logger.debug(f"Edit: route id {id} does not match product id {product.id}")
            return NotFoundResult()

        model_state = model_state or ModelState()
        if not model_state.is_valid:
            return ViewResult("Edit", product)

        await self._repository.update(product)
        logger.info(f"Updated product {id}")
        return RedirectToActionResult(INDEX)

    async def delete(self, id: Optional[int]) -> ActionResult:
        if id is None:
            return NotFoundResult()

        product = await self._repository.get_by_id(id)
        if product is None:
            logger.debug(f"Delete: product {id} not found")
            return NotFoundResult()
        return ViewResult("Delete", product)

    async def delete_confirmed(self, id: int) -> ActionResult:
        # not guarded: a missing product is still handed to delete
        product = await self._repository.get_by_id(id)
        await self._repository.delete(product)
        logger.info(f"Deleted product {id}")
        return RedirectToActionResult(INDEX)
