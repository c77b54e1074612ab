# routers/products.py
from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel
from typing import Any, Dict, Optional

from config import Settings, get_settings
from controllers.products import ProductsController
from controllers.results import ActionResult, NotFoundResult, RedirectToActionResult, ViewResult
from models.model_state import ModelState, bind_product
from repository.base import Repository
from repository.product_repository import SqliteProductRepository
from routers.api_key import get_api_key

router = APIRouter(prefix="/products", tags=["products"])

def get_repository(settings: Settings = Depends(get_settings)) -> Repository:
    return SqliteProductRepository(settings.db_file)

def get_controller(repository: Repository = Depends(get_repository)) -> ProductsController:
    return ProductsController(repository)

def encode_model(model: Any) -> Any:
    if isinstance(model, BaseModel):
        # echoed invalid input is unvalidated, so skip serializer warnings
        return model.model_dump(mode="json", warnings=False)
    if isinstance(model, (list, tuple)):
        return [encode_model(m) for m in model]
    return model

def render(result: ActionResult, request: Request, model_state: Optional[ModelState] = None):
    if isinstance(result, ViewResult):
        invalid = model_state is not None and not model_state.is_valid
        body = {
            "view": result.view_name,
            "model": encode_model(result.model),
            "errors": model_state.errors if model_state is not None else {},
        }
        return JSONResponse(body, status_code=422 if invalid else 200)
    if isinstance(result, RedirectToActionResult):
        url = request.url_for(result.action_name.lower())
        return RedirectResponse(str(url), status_code=303)
    if isinstance(result, NotFoundResult):
        raise HTTPException(status_code=result.status_code, detail="Product not found")
    raise TypeError(f"Unsupported action result: {result!r}")

@router.get("/", name="index")
async def index(request: Request, controller: ProductsController = Depends(get_controller)):
    return render(await controller.index(), request)

@router.get("/details", name="details")
@router.get("/details/{id}")
async def details(request: Request, id: Optional[int] = None,
                  controller: ProductsController = Depends(get_controller)):
    return render(await controller.details(id), request)

@router.get("/create", name="create")
def create(request: Request, controller: ProductsController = Depends(get_controller)):
    return render(controller.create(), request)

@router.post("/create", dependencies=[Depends(get_api_key)])
async def create_post(request: Request, payload: Dict[str, Any] = Body(...),
                      controller: ProductsController = Depends(get_controller)):
    product, model_state = bind_product(payload)
    return render(await controller.create_post(product, model_state), request, model_state)

@router.get("/edit", name="edit")
@router.get("/edit/{id}")
async def edit(request: Request, id: Optional[int] = None,
               controller: ProductsController = Depends(get_controller)):
    return render(await controller.edit(id), request)

@router.post("/edit/{id}", dependencies=[Depends(get_api_key)])
async def edit_post(request: Request, id: int, payload: Dict[str, Any] = Body(...),
                    controller: ProductsController = Depends(get_controller)):
    product, model_state = bind_product(payload)
    return render(await controller.edit_post(id, product, model_state), request, model_state)

@router.get("/delete", name="delete")
@router.get("/delete/{id}")
async def delete(request: Request, id: Optional[int] = None,
                 controller: ProductsController = Depends(get_controller)):
    return render(await controller.delete(id), request)

@router.post("/delete/{id}", dependencies=[Depends(get_api_key)])
async def delete_confirmed(request: Request, id: int,
                           controller: ProductsController = Depends(get_controller)):
    return render(await controller.delete_confirmed(id), request)
