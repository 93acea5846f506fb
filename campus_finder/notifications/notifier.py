"""
Match notifications: tell owners of lost items that something in the same
category was just found.

`MatchNotifier.notify` takes the decoded JSON body of a request, either
``{"foundItem": {...}}`` with the item inline or ``{"foundItemId": ...}``
to load it from the item store, and returns a `NotificationSummary`.
Errors that end the request are raised as `NotifierError` subclasses;
failed deliveries are reported in the summary instead.
"""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional
import logging

from campus_finder.constants import DEFAULT_FROM_EMAIL
from campus_finder.errors import ValidationError, ConfigurationError
from campus_finder.functions import is_email
from campus_finder.notifications.email import compose_found_match_email
from campus_finder.notifications.forms import FoundItemForm


@dataclass
class NotifierConfig:
    item_store: str = 'sql'
    database_url: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    resend_api_key: Optional[str] = None
    resend_api_url: str = 'https://api.resend.com/emails'
    from_email: str = DEFAULT_FROM_EMAIL
    max_workers: int = 4

    @classmethod
    def from_app_config(cls, config):
        return cls(
            item_store=config.get('ITEM_STORE', 'sql'),
            database_url=config.get('SQLALCHEMY_DATABASE_URI'),
            supabase_url=config.get('SUPABASE_URL'),
            supabase_service_role_key=config.get('SUPABASE_SERVICE_ROLE_KEY'),
            resend_api_key=config.get('RESEND_API_KEY'),
            resend_api_url=config.get('RESEND_API_URL') or cls.resend_api_url,
            from_email=config.get('FROM_EMAIL') or DEFAULT_FROM_EMAIL,
            max_workers=config.get('NOTIFY_MAX_WORKERS') or cls.max_workers,
        )

    @property
    def store_configured(self):
        if self.item_store == 'supabase':
            return bool(self.supabase_url and self.supabase_service_role_key)
        return bool(self.database_url)

    @property
    def email_configured(self):
        return bool(self.resend_api_key)


@dataclass
class DeliveryResult:
    to: str
    ok: bool
    error: Optional[str] = None

    def to_dict(self):
        return {'to': self.to, 'error': self.error}


@dataclass
class NotificationSummary:
    category: Optional[str]
    recipients: List[str] = field(default_factory=list)
    results: List[DeliveryResult] = field(default_factory=list)
    message: Optional[str] = None
    subject: Optional[str] = None
    dispatched: bool = False

    @property
    def successes(self):
        return [r.to for r in self.results if r.ok]

    @property
    def failures(self):
        return [r for r in self.results if not r.ok]

    def to_dict(self):
        body = {
            'category': self.category,
            'recipients': list(self.recipients),
            'recipient_count': len(self.recipients),
            'sent': len(self.successes),
            'successes': self.successes,
            'failures': [r.to_dict() for r in self.failures],
        }
        if self.message:
            body['message'] = self.message
        if self.recipients and not self.dispatched:
            body['would_notify'] = list(self.recipients)
            body['subject'] = self.subject
        return body


class MatchNotifier:
    def __init__(self, config, store=None, accounts=None, sender=None, logger=None):
        self.config = config
        self.store = store
        self.accounts = accounts
        self.sender = sender
        self.logger = logger or logging.getLogger(__name__)

    def notify(self, body):
        found = self.resolve_found_item(body)
        category = found['category']

        recipients = self.resolve_recipients(found)
        if not recipients:
            self.logger.info("No recipients to notify for found item %s in %s", found.get('id'), category)
            return NotificationSummary(category=category, message='No recipients to notify')

        subject, html = compose_found_match_email(found)

        if not self.config.email_configured:
            self.logger.warning("RESEND_API_KEY is not set, skipping %d notification(s)", len(recipients))
            return NotificationSummary(
                category=category,
                recipients=recipients,
                subject=subject,
                message='Email provider not configured. Set RESEND_API_KEY and FROM_EMAIL.',
            )

        self.logger.info("Notifying %d recipient(s) about found item %s in %s",
                         len(recipients), found.get('id'), category)
        results = self.dispatch(recipients, subject, html)
        for result in results:
            if not result.ok:
                self.logger.warning("Failed to send match notification to %s: %s", result.to, result.error)

        return NotificationSummary(
            category=category,
            recipients=recipients,
            results=results,
            subject=subject,
            dispatched=True,
        )

    # ---------- Found item ---------- #
    def resolve_found_item(self, body):
        if not isinstance(body, dict):
            raise ValidationError('Request body must be a JSON object')

        item_id = body.get('foundItemId')
        if item_id is None:
            item_id = body.get('found_item_id')
        payload = body.get('foundItem')
        if payload is None:
            payload = body.get('found_item')

        if item_id is None and payload is None:
            raise ValidationError('foundItem or foundItemId is required')

        if item_id is None:
            if not isinstance(payload, dict):
                raise ValidationError('foundItem must be an object')
            found = self._validate(payload)
            self._require_store()
            return found

        self._require_store()
        return self._validate(self.store.get_found_item(item_id))

    def _require_store(self):
        if not self.config.store_configured or self.store is None:
            raise ConfigurationError('Server missing item store configuration')

    def _validate(self, payload):
        form = FoundItemForm.from_payload(payload)
        if not form.validate():
            raise ValidationError(form.first_error())
        return {name: form.data.get(name) for name in FoundItemForm.field_names}

    # ---------- Recipients ---------- #
    def resolve_recipients(self, found):
        finder = str(found['user_id'])
        candidates = self.store.find_lost_candidates(found['category'], finder)

        recipients = {}
        looked_up = {}
        for candidate in candidates:
            owner = candidate.get('user_id')
            if owner is not None and str(owner) == finder:
                continue

            contact = candidate.get('contact_info')
            if is_email(contact):
                recipients.setdefault(contact.strip(), None)
                continue

            if owner is None:
                continue
            if owner not in looked_up:
                looked_up[owner] = self._lookup_email(owner)
            email = looked_up[owner]
            if email:
                recipients.setdefault(email, None)

        return list(recipients)

    def _lookup_email(self, user_id):
        if self.accounts is None:
            return None
        try:
            return self.accounts.lookup_email(user_id)
        except Exception as e:
            self.logger.warning("Failed to fetch email for user %s: %s", user_id, e)
            return None

    # ---------- Delivery ---------- #
    def dispatch(self, recipients, subject, html):
        def deliver(to):
            try:
                return self.sender.send(to, subject, html)
            except Exception as e:
                return DeliveryResult(to=to, ok=False, error=str(e))

        workers = max(1, min(self.config.max_workers, len(recipients)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(deliver, recipients))
