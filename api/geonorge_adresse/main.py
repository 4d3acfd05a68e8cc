import httpx
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from . import adresse, schemas
from .errors import InvalidArgumentError, ServiceError

app = FastAPI(title="Geonorge Address API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _respond(search, *args, **kwargs) -> schemas.SearchResponse:
    try:
        addresses = search(*args, **kwargs)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ServiceError as exc:
        # Upstream failures are reported as a bad gateway, not our own 500
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return schemas.SearchResponse(count=len(addresses), addresses=addresses)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/api/adresse/sok", response_model=schemas.SearchResponse)
def search(
    q: str,
    page: int = Query(0, ge=0),
    per_page: int = Query(10, ge=1),
    client: httpx.Client = Depends(adresse.get_client),
):
    return _respond(adresse.search, q, page=page, per_page=per_page, client=client)


@app.get("/api/adresse/radius", response_model=schemas.SearchResponse)
def search_radius(
    north: float,
    east: float,
    radius: float = 1.0,
    page: int = Query(0, ge=0),
    per_page: int = Query(10, ge=1),
    client: httpx.Client = Depends(adresse.get_client),
):
    return _respond(
        adresse.search_radius,
        north,
        east,
        radius=radius,
        page=page,
        per_page=per_page,
        client=client,
    )


@app.get("/api/adresse/box", response_model=schemas.SearchResponse)
def search_box(
    north_lower: float,
    east_lower: float,
    north_upper: float,
    east_upper: float,
    page: int = Query(0, ge=0),
    per_page: int = Query(10, ge=1),
    client: httpx.Client = Depends(adresse.get_client),
):
    return _respond(
        adresse.search_box,
        north_lower,
        east_lower,
        north_upper,
        east_upper,
        page=page,
        per_page=per_page,
        client=client,
    )
