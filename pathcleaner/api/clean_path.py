"""
POST /clean-path, POST /clean-paths
Resolve terminal text fragments to verified absolute paths with optional
line/column locators. A fragment that is not a path still returns 200 with
``clean_path: null``.

Routes are gated by ENABLE_CLEAN_ENDPOINT and run every clean on the
executor stored on ``app.state.cleaner_executor``.
"""
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request

from pathcleaner.core.config import ENABLE_CLEAN_ENDPOINT
from pathcleaner.models.clean_request import CleanPathRequest
from pathcleaner.models.cleaning_result import CleaningResult
from pathcleaner.services.async_cleaner import clean_async
from pathcleaner.services.path_cleaner import PathCleaner

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Paths"])

_ENABLED = ENABLE_CLEAN_ENDPOINT


def _check_enabled() -> None:
    if not _ENABLED:
        raise HTTPException(status_code=404, detail="Not found")


async def _clean_one(request: Request, body: CleanPathRequest) -> CleaningResult:
    cleaner = PathCleaner(body.token, body.suffix, body.working_directory)
    executor = getattr(request.app.state, "cleaner_executor", None)
    result = await clean_async(cleaner, executor)
    logger.debug("Cleaned %r → %s", body.token, result.clean_path)
    return result


@router.post("/clean-path", response_model=CleaningResult)
async def clean_path(body: CleanPathRequest, request: Request):
    _check_enabled()
    return await _clean_one(request, body)


@router.post("/clean-paths", response_model=List[CleaningResult])
async def clean_paths(bodies: List[CleanPathRequest], request: Request):
    _check_enabled()
    results: List[CleaningResult] = []
    for body in bodies:
        results.append(await _clean_one(request, body))
    return results
