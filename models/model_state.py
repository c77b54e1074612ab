# models/model_state.py
"""Validation state handed to the controller's submit actions."""
from typing import Any, Dict, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from models.product import Product, ProductCreate

_id_adapter = TypeAdapter(Optional[int])


class ModelState:
    """Field-level validation errors for one submitted entity.

    The state is valid when no error has been recorded. An error with an
    empty message still invalidates it.
    """

    def __init__(self):
        self._errors: Dict[str, List[str]] = {}

    def add_model_error(self, key: str, message: str) -> None:
        self._errors.setdefault(key, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self._errors.items()}

    def __repr__(self):
        return f"ModelState(is_valid={self.is_valid}, errors={self._errors!r})"


def bind_product(payload: Dict[str, Any]) -> Tuple[Product, ModelState]:
    """Validate a submitted payload and build the product it describes.

    On failure the submitted values are echoed back in an unvalidated
    Product, alongside the collected errors. Omitted fields take their
    defaults and a well-formed id is still coerced to an int.
    """
    state = ModelState()
    try:
        form = ProductCreate.model_validate(payload)
    except ValidationError as exc:
        for err in exc.errors():
            key = ".".join(str(part) for part in err["loc"]) or "__all__"
            state.add_model_error(key, err["msg"])
        submitted = {k: v for k, v in payload.items() if k in Product.model_fields}
        # name has no default to fall back on
        submitted.setdefault("name", None)
        if "id" in submitted and "id" not in state.errors:
            submitted["id"] = _id_adapter.validate_python(submitted["id"])
        return Product.model_construct(**submitted), state
    return Product(**form.model_dump()), state
