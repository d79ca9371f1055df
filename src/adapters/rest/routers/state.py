"""Read-only endpoints: current proverb list and the tool catalog."""

from fastapi import APIRouter, Depends

from adapters.rest.dependencies import get_factory
from adapters.rest.schemas import ProverbsStateOut, ToolOut
from factory import ServiceFactory

router = APIRouter(tags=["state"])


@router.get("/state", response_model=ProverbsStateOut)
async def get_state(factory: ServiceFactory = Depends(get_factory)):
    """Full list, for clients that need to resynchronize."""
    return ProverbsStateOut(proverbs=list(factory.store.get_all()))


@router.get("/tools", response_model=list[ToolOut])
async def list_tools(factory: ServiceFactory = Depends(get_factory)):
    return [ToolOut(**entry) for entry in factory.registry.describe()]
