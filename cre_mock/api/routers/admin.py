"""Dataset maintenance endpoints."""

import logging

from fastapi import APIRouter, Depends

from cre_mock.api.dependencies import get_query_service
from cre_mock.query.facade import QueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["admin"])


@router.post("/reset-data")
def reset_data(service: QueryService = Depends(get_query_service)) -> dict[str, str]:
    """Throw away the current dataset and generate a new one.

    A failure answers 500 ``REGENERATION_FAILED`` and keeps the old dataset.
    """
    logger.info("Received request to reset data")
    service.reset()
    return {"message": "Mock data regenerated successfully."}
