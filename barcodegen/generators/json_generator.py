"""JSON-представление: {"height":H,"xdim":X,"encoding":[...]}."""

from __future__ import annotations

import json
from typing import Sequence

from barcodegen.generators.base import check_dimensions, check_modules

__all__ = ["JSONGenerator"]


class JSONGenerator:
    def __init__(self, height: int = 10, xdim: int = 1) -> None:
        check_dimensions(height, xdim)
        self.height = height
        self.xdim = xdim

    def generate(self, modules: Sequence[int]) -> str:
        payload = {
            "height": self.height,
            "xdim": self.xdim,
            "encoding": check_modules(modules),
        }
        return json.dumps(payload, separators=(",", ":"))
