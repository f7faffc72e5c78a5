"""
Subscribe Relay
Validates an email opt-in and forwards it to the operator's webhook.
"""

import logging

import requests
from requests.exceptions import Timeout, RequestException

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = 'prjct-zenith-calculator'


class SubscribeError(Exception):
    """Base relay error; carries the HTTP status and the public message."""

    status_code = 400
    public_message = 'Bad request'

    def to_response(self):
        return {'ok': False, 'error': self.public_message}


class BadRequestBody(SubscribeError):
    pass


class InvalidEmail(SubscribeError):
    public_message = 'Invalid email'


class WebhookNotConfigured(SubscribeError):
    status_code = 500
    public_message = 'Missing SUBSCRIBE_WEBHOOK_URL'


class RelayFailed(SubscribeError):
    status_code = 502
    public_message = 'Subscribe failed'


def _email_domain(email):
    return email.rpartition('@')[2] or '(none)'


def build_webhook_payload(email, payload=None, source=DEFAULT_SOURCE):
    return {'email': email, 'payload': payload, 'source': source}


def relay_subscription(body, webhook_url, source=DEFAULT_SOURCE, timeout=10):
    """
    Forward one opt-in to the webhook.

    Args:
        body: Decoded JSON request body, expected ``{"email": str, "payload"?: any}``
        webhook_url: Destination URL; ``None`` or empty means not configured
        source: Tag sent along so the receiver knows where the lead came from
        timeout: Seconds to wait for the webhook

    Raises:
        SubscribeError subclass describing what went wrong. Nothing is retried.
    """
    if not isinstance(body, dict):
        raise BadRequestBody('request body is not a JSON object')

    email = body.get('email')
    if not email or not isinstance(email, str):
        raise InvalidEmail('email missing or not a string')

    if not webhook_url:
        logger.error("[SubscribeRelay] Webhook URL is not configured")
        raise WebhookNotConfigured('SUBSCRIBE_WEBHOOK_URL is not set')

    forwarded = build_webhook_payload(email, body.get('payload'), source)

    logger.info("[SubscribeRelay] Forwarding subscription", extra={
        'email_domain': _email_domain(email),
        'has_payload': forwarded['payload'] is not None,
        'source': source,
    })

    try:
        response = requests.post(webhook_url, json=forwarded, timeout=timeout)
        response.raise_for_status()
    except Timeout as e:
        logger.warning("[SubscribeRelay] Webhook timed out", extra={
            'timeout': timeout,
            'error_message': str(e),
        })
        raise RelayFailed('webhook timed out') from e
    except RequestException as e:
        logger.warning("[SubscribeRelay] Webhook request failed", extra={
            'error_type': type(e).__name__,
            'error_message': str(e),
        })
        raise RelayFailed(str(e)) from e

    logger.info("[SubscribeRelay] Subscription forwarded", extra={
        'status_code': response.status_code,
    })
    return {'ok': True}
