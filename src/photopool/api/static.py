"""Static serving of the photo pool directory."""

from __future__ import annotations

import os

from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.types import Scope


class PoolStaticFiles(StaticFiles):
    """StaticFiles that never serves hidden entries such as in-flight ``.tmp-*`` uploads."""

    async def get_response(self, path: str, scope: Scope):
        parts = path.replace(os.sep, "/").split("/")
        if any(part.startswith(".") for part in parts if part):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
