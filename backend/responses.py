"""JSON response that writes Decimal values as exact JSON numbers.

Starlette's JSONResponse goes through the stdlib encoder, which cannot emit a
Decimal as a number. simplejson can, and keeps the scale (50.00 stays 50.00).
"""

from typing import Any

import simplejson
from fastapi.responses import JSONResponse


class DecimalJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
