from fastapi import APIRouter, Depends

from meetnotes.config import get_config, RelayConfig

from .models import SummaryPayload, SummaryResult
from .processor import summarize

router = APIRouter()


@router.post('/summarize', responses={400: {'description': 'Missing text input'}, 500: {'description': 'Upstream failure'}})
async def get_summary(payload: SummaryPayload, config: RelayConfig = Depends(get_config)) -> SummaryResult:
    """
    Summarizes the given transcript with the generation API.
    """

    return await summarize(payload, config)
