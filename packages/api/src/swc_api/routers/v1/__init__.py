from fastapi import APIRouter

from swc_api.routers.v1 import boqs, catalog, designs, sites

v1_router = APIRouter(prefix="/v1")

for module in (catalog, sites, designs, boqs):
    for router in module.routers:
        v1_router.include_router(router)
