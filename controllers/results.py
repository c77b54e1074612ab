# controllers/results.py
"""Outcomes a controller action can produce.

The hosting layer decides how each kind is turned into a response.
"""
from dataclasses import dataclass
from typing import Any, Optional


class ActionResult:
    pass


@dataclass(frozen=True)
class ViewResult(ActionResult):
    view_name: str
    model: Optional[Any] = None


@dataclass(frozen=True)
class RedirectToActionResult(ActionResult):
    action_name: str


@dataclass(frozen=True)
class NotFoundResult(ActionResult):
    status_code: int = 404
