"""FastAPI application entrypoint for docresolver service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import load_config
from ..logging import get_logger
from ..models import DocFqn, DocSig, DocSigPair
from ..resolver import UriResolver

_LOGGER = get_logger("service")


class SigPayload(BaseModel):
    pack: str
    type_name: str
    member: Optional[str] = None

    def to_sig(self) -> DocSig:
        return DocSig(DocFqn(self.pack, self.type_name), self.member)


class ResolveRequest(BaseModel):
    sig: Optional[SigPayload] = None
    scala: Optional[SigPayload] = None
    java: Optional[SigPayload] = None

    def to_pair(self) -> DocSigPair:
        if self.sig is not None:
            return DocSigPair.symmetric(self.sig.to_sig())
        if self.scala is None and self.java is None:
            raise ValueError("Provide either 'sig' or at least one of 'scala'/'java'")
        scala = (self.scala or self.java).to_sig()  # type: ignore[union-attr]
        java = (self.java or self.scala).to_sig()  # type: ignore[union-attr]
        return DocSigPair(scala=scala, java=java)


class ResolveResponse(BaseModel):
    found: bool
    uri: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    archives: int


def _default_resolver() -> UriResolver:
    return UriResolver.from_config(load_config(Path.cwd()))


def create_app(
    resolver_factory: Callable[[], UriResolver] = _default_resolver,
) -> FastAPI:
    """Create the FastAPI application exposing resolution queries.

    The factory runs once, so archives are scanned before the first request is
    served and every request shares the same read-only catalog.
    """

    app = FastAPI(title="DocResolver Service", version="1.0.0")
    resolver = resolver_factory()

    async def get_resolver() -> UriResolver:
        return resolver

    @app.get("/health", response_model=HealthResponse)
    async def health(
        resolver: UriResolver = Depends(get_resolver),
    ) -> HealthResponse:
        return HealthResponse(status="ok", archives=len(resolver.catalog))

    @app.post("/resolve", response_model=ResolveResponse)
    async def resolve(
        payload: ResolveRequest,
        resolver: UriResolver = Depends(get_resolver),
    ) -> ResolveResponse:
        pair = payload.to_pair()

        loop = asyncio.get_running_loop()
        uri = await loop.run_in_executor(None, resolver.resolve, pair)
        if uri is None:
            _LOGGER.debug("No documentation found for %s", pair)
            return ResolveResponse(found=False)
        return ResolveResponse(found=True, uri=uri)

    @app.exception_handler(ValueError)
    async def invalid_query_handler(
        _: Any, exc: ValueError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    resolver: UriResolver, host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(lambda: resolver)
    uvicorn.run(app, host=host, port=port)
