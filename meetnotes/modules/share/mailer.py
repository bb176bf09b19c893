import asyncio
import re
import smtplib
import time
from email.message import EmailMessage

from meetnotes.config import RelayConfig
from meetnotes.constants import share_subject
from meetnotes.errors import ConfigurationError, DeliveryError, ValidationError
from meetnotes.logs import get_logger
from meetnotes.modules.monitoring import SHARE_DURATION_METRIC, SHARE_RECIPIENTS_METRIC

from .models import SharePayload, ShareResult

log = get_logger(__name__)

missing_credentials_message = 'Missing email credentials in environment'

# only a plausibility check, the relay has the final word on addresses
address_pattern = re.compile(r'^[^@\s]+@[^@\s]+$')


def validate_payload(payload: SharePayload) -> None:
    if not payload.summary or not payload.summary.strip():
        raise ValidationError('Missing summary')

    if not payload.emails:
        raise ValidationError('Missing recipient emails')

    invalid = [address for address in payload.emails if not address_pattern.match(address)]
    if invalid:
        raise ValidationError(f'Invalid recipient emails: {", ".join(invalid)}')


def build_message(sender: str, recipients: list[str], summary: str) -> EmailMessage:
    message = EmailMessage()
    message['From'] = sender
    message['To'] = ', '.join(recipients)
    message['Subject'] = share_subject
    message.set_content(summary)

    return message


def describe_smtp_error(error: Exception) -> str:
    """Turns smtplib / socket failures into the message reported to the caller."""

    if isinstance(error, smtplib.SMTPRecipientsRefused):
        return f'Recipients refused: {", ".join(error.recipients)}'

    if isinstance(error, smtplib.SMTPResponseException):
        detail = error.smtp_error
        if isinstance(detail, bytes):
            detail = detail.decode(errors='replace')

        return f'{error.smtp_code} {detail}'.strip()

    return str(error) or type(error).__name__


def deliver(message: EmailMessage, config: RelayConfig) -> None:
    """Blocking SMTP submission over implicit TLS: login, send, quit."""

    with smtplib.SMTP_SSL(config.smtp_host, config.smtp_port) as smtp:
        smtp.login(config.email_user, config.email_pass)
        refused = smtp.send_message(message)

    # the relay accepted the message for some recipients only
    if refused:
        raise smtplib.SMTPRecipientsRefused(refused)


async def share_summary(payload: SharePayload, config: RelayConfig) -> ShareResult:
    validate_payload(payload)

    if not config.email_user or not config.email_pass:
        raise ConfigurationError(missing_credentials_message)

    message = build_message(config.email_user, payload.emails, payload.summary)

    start = time.perf_counter()

    try:
        await asyncio.to_thread(deliver, message, config)
    except (smtplib.SMTPException, OSError) as e:
        detail = describe_smtp_error(e)
        log.warning(f'Failed to send summary to {len(payload.emails)} recipient(s): {detail}')
        raise DeliveryError(detail) from e

    SHARE_DURATION_METRIC.observe(time.perf_counter() - start)
    SHARE_RECIPIENTS_METRIC.observe(len(payload.emails))
    log.info(f'Summary sent to {len(payload.emails)} recipient(s) via {config.smtp_host}')

    return ShareResult()


__all__ = ['build_message', 'deliver', 'describe_smtp_error', 'share_summary', 'validate_payload']
