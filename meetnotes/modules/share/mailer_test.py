import smtplib

import pytest

from meetnotes.config import RelayConfig
from meetnotes.errors import ConfigurationError, DeliveryError, ValidationError
from meetnotes.modules.share.mailer import build_message, deliver, describe_smtp_error, share_summary
from meetnotes.modules.share.models import SharePayload

config = RelayConfig(email_user='notes@example.com', email_pass='app-password')


@pytest.fixture()
def smtp_ssl(mocker):
    smtp_ssl = mocker.patch('meetnotes.modules.share.mailer.smtplib.SMTP_SSL')
    smtp_ssl.return_value.__enter__.return_value.send_message.return_value = {}

    return smtp_ssl


class TestSharePayload:
    def test_accepts_comma_separated_string(self):
        '''Test that a single string of addresses is split into a list.'''

        payload = SharePayload(summary='s', emails='alice@example.com, bob@example.com;carol@example.com')

        assert payload.emails == ['alice@example.com', 'bob@example.com', 'carol@example.com']

    def test_drops_blank_addresses(self):
        '''Test that empty entries are removed and the rest trimmed.'''

        payload = SharePayload(summary='s', emails=[' alice@example.com ', '', '  '])

        assert payload.emails == ['alice@example.com']


class TestBuildMessage:
    def test_build_message(self):
        '''Test that the message carries sender, recipients, subject and body.'''

        message = build_message('notes@example.com', ['alice@example.com', 'bob@example.com'], 'We ship Friday.')

        assert message['From'] == 'notes@example.com'
        assert message['To'] == 'alice@example.com, bob@example.com'
        assert message['Subject'] == 'Meeting Summary'
        assert message.get_content().strip() == 'We ship Friday.'


class TestDescribeSmtpError:
    def test_response_errors_use_server_reply(self):
        '''Test that SMTP replies are reported with code and text.'''

        error = smtplib.SMTPAuthenticationError(535, b'5.7.8 Username and Password not accepted')

        assert describe_smtp_error(error) == '535 5.7.8 Username and Password not accepted'

    def test_refused_recipients_are_listed(self):
        '''Test that refused recipients are named.'''

        error = smtplib.SMTPRecipientsRefused({'nobody@example.com': (550, b'No such user')})

        assert describe_smtp_error(error) == 'Recipients refused: nobody@example.com'

    def test_network_errors_use_their_message(self):
        '''Test that socket level errors keep their message.'''

        assert describe_smtp_error(ConnectionRefusedError('Connection refused')) == 'Connection refused'
        assert describe_smtp_error(smtplib.SMTPServerDisconnected()) == 'SMTPServerDisconnected'


class TestDeliver:
    def test_deliver(self, smtp_ssl):
        '''Test that one SMTP session logs in and sends the message.'''

        message = build_message('notes@example.com', ['alice@example.com'], 'summary')

        deliver(message, config)

        smtp_ssl.assert_called_once_with('smtp.gmail.com', 465)
        smtp = smtp_ssl.return_value.__enter__.return_value
        smtp.login.assert_called_once_with('notes@example.com', 'app-password')
        smtp.send_message.assert_called_once_with(message)


class TestShareSummary:
    @pytest.mark.asyncio
    async def test_share_summary(self, smtp_ssl):
        '''Test that a valid request is sent and confirmed.'''

        result = await share_summary(SharePayload(summary='We ship Friday.', emails=['alice@example.com']), config)

        assert result.message == 'Summary sent successfully!'
        smtp = smtp_ssl.return_value.__enter__.return_value
        sent = smtp.send_message.call_args.args[0]
        assert sent['To'] == 'alice@example.com'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'payload, message',
        [
            (SharePayload(emails=['alice@example.com']), 'Missing summary'),
            (SharePayload(summary='  ', emails=['alice@example.com']), 'Missing summary'),
            (SharePayload(summary='s'), 'Missing recipient emails'),
            (SharePayload(summary='s', emails=['', ' ']), 'Missing recipient emails'),
            (SharePayload(summary='s', emails=['alice@example.com', 'bob']), 'Invalid recipient emails: bob'),
        ],
    )
    async def test_invalid_payload(self, smtp_ssl, payload, message):
        '''Test that invalid requests are rejected before any transport is created.'''

        with pytest.raises(ValidationError, match=message):
            await share_summary(payload, config)

        smtp_ssl.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'credentials', [RelayConfig(), RelayConfig(email_user='notes@example.com'), RelayConfig(email_pass='secret')]
    )
    async def test_missing_credentials(self, smtp_ssl, credentials):
        '''Test that missing credentials are a configuration error and no transport is created.'''

        with pytest.raises(ConfigurationError, match='Missing email credentials in environment'):
            await share_summary(SharePayload(summary='s', emails=['alice@example.com']), credentials)

        smtp_ssl.assert_not_called()

    @pytest.mark.asyncio
    async def test_transport_failure(self, smtp_ssl):
        '''Test that a transport failure is a delivery error carrying the transport message.'''

        smtp = smtp_ssl.return_value.__enter__.return_value
        smtp.login.side_effect = smtplib.SMTPAuthenticationError(535, b'5.7.8 Username and Password not accepted')

        with pytest.raises(DeliveryError) as e:
            await share_summary(SharePayload(summary='s', emails=['alice@example.com']), config)

        assert e.value.message == '535 5.7.8 Username and Password not accepted'
        assert e.value.status_code == 500
        smtp.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_connection_failure(self, smtp_ssl):
        '''Test that failing to reach the relay is a delivery error.'''

        smtp_ssl.side_effect = OSError('Network is unreachable')

        with pytest.raises(DeliveryError, match='Network is unreachable'):
            await share_summary(SharePayload(summary='s', emails=['alice@example.com']), config)

    @pytest.mark.asyncio
    async def test_partially_refused_recipients(self, smtp_ssl):
        '''Test that recipients refused by the relay fail the request even when others were accepted.'''

        smtp = smtp_ssl.return_value.__enter__.return_value
        smtp.send_message.return_value = {'nobody@example.com': (550, b'5.1.1 No such user')}

        with pytest.raises(DeliveryError) as e:
            await share_summary(SharePayload(summary='s', emails=['alice@example.com', 'nobody@example.com']), config)

        assert e.value.message == 'Recipients refused: nobody@example.com'
        smtp.send_message.assert_called_once()
