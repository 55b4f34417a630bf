from fastapi import APIRouter, Depends

from jackpot_wall.api.deps import get_app_settings
from jackpot_wall.config import Settings

router = APIRouter(tags=["network"])


@router.get("/network")
def network_info(settings: Settings = Depends(get_app_settings)):
    """Which network and deployed contract the dashboard should target."""
    address = settings.contract_address
    return {
        "network": settings.network,
        "contract_address": address,
        "contract_name": settings.contract_name,
        "contract_id": f"{address}.{settings.contract_name}",
        "stacks_api": f"https://{settings.stacks_host()}",
    }
