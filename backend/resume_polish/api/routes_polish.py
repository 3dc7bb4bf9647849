from fastapi import APIRouter, Depends, HTTPException, Request
import logging

from ..ai_service import PolishService
from ..errors import ServiceError
from ..schemas import PolishEnvelope, PolishRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


def get_polish_service(request: Request) -> PolishService:
    service = getattr(request.app.state, "polish_service", None)
    if service is None:
        init_error = getattr(request.app.state, "polish_init_error", None)
        logger.error(f"AI Service initialization failed: {init_error}")
        raise HTTPException(500, "AI Service not available")
    return service


@router.post("/polish", response_model=PolishEnvelope)
async def polish_text(body: PolishRequest, service: PolishService = Depends(get_polish_service)):
    logger.info(f"Polishing text for section: {body.section_type}")
    try:
        result = await service.polish(body)
    except ServiceError as e:
        raise HTTPException(500, str(e))
    return PolishEnvelope(data=result)
