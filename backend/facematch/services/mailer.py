import smtplib
from email.message import EmailMessage

from flask import current_app

from facematch.errors import AlertDeliveryError


def send_email(recipient_key: str, subject: str, body: str) -> None:
    """Send a plain-text email to the address configured under ``recipient_key``.

    Recipient keys map to addresses through the ``ALERT_RECIPIENTS`` config
    so callers never handle raw addresses. Must run inside an app context.
    """
    cfg = current_app.config
    recipient = (cfg.get('ALERT_RECIPIENTS') or {}).get(recipient_key)
    if not recipient:
        raise AlertDeliveryError(f"No address configured for recipient '{recipient_key}'")
    host = cfg.get('SMTP_HOST')
    if not host:
        raise AlertDeliveryError('SMTP_HOST is not configured')

    msg = EmailMessage()
    msg['Subject'] = subject
    msg['From'] = cfg.get('MAIL_SENDER') or cfg.get('SMTP_USER') or 'noreply@localhost'
    msg['To'] = recipient
    msg.set_content(body)

    with smtplib.SMTP(host, int(cfg.get('SMTP_PORT', 587)), timeout=10) as server:
        if cfg.get('SMTP_USE_TLS'):
            server.starttls()
        if cfg.get('SMTP_USER') and cfg.get('SMTP_PASS'):
            server.login(cfg['SMTP_USER'], cfg['SMTP_PASS'])
        server.send_message(msg)
