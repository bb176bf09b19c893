from fastapi import APIRouter, Depends

from meetnotes.config import get_config, RelayConfig

from .mailer import share_summary
from .models import SharePayload, ShareResult

router = APIRouter()

responses = {
    400: {
        'description': 'Missing summary, missing recipients or malformed addresses. '
        'Reported as 400 like every other input error, not as 500.'
    },
    500: {'description': 'Missing mail credentials or delivery failure, with the relay message'},
}


@router.post('/share', responses=responses)
async def share(payload: SharePayload, config: RelayConfig = Depends(get_config)) -> ShareResult:
    """
    Emails the summary to the given recipients.

    Input errors are answered with 400, configuration and delivery errors with 500.
    """

    return await share_summary(payload, config)
