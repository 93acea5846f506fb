from flask import request, jsonify, make_response, current_app
from campus_finder.notifications import notifications
from campus_finder.constants import CORS_HEADERS
from campus_finder.errors import NotifierError
from campus_finder.notifications.notifier import MatchNotifier, NotifierConfig
from campus_finder.notifications.sender import ResendEmailSender
from campus_finder.notifications.stores import (
    SqlItemStore, SqlAccountDirectory,
    SupabaseClient, SupabaseItemStore, SupabaseAccountDirectory,
)


def build_notifier(config, logger=None):
    store = accounts = sender = None

    if config.store_configured:
        if config.item_store == 'supabase':
            client = SupabaseClient(config.supabase_url, config.supabase_service_role_key)
            store = SupabaseItemStore(client)
            accounts = SupabaseAccountDirectory(client)
        else:
            store = SqlItemStore()
            accounts = SqlAccountDirectory()

    if config.email_configured:
        sender = ResendEmailSender(config.resend_api_key, config.from_email, config.resend_api_url)

    return MatchNotifier(config, store=store, accounts=accounts, sender=sender, logger=logger)


@notifications.after_request
def add_cors_headers(response):
    response.headers.update(CORS_HEADERS)
    return response


# ---------- Found item match notifications ---------- #
@notifications.route('/api/notify-matches', methods=['POST', 'GET', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'])
@notifications.route('/api/notify-lost-on-found', methods=['POST', 'GET', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'])
def notify_matches():
    """
    Email owners of active lost items in the category of a found item.

    Body is either {"foundItem": {...}} or {"foundItemId": ...}.
    Returns a summary of who was (or would have been) notified.
    """
    if request.method == 'OPTIONS':
        return make_response('ok', 200)

    if request.method != 'POST':
        return jsonify({'error': 'Method not allowed'}), 405

    body = request.get_json(force=True, silent=True)
    if body is None:
        return jsonify({'error': 'Invalid JSON body'}), 400

    try:
        config = NotifierConfig.from_app_config(current_app.config)
        notifier = build_notifier(config, logger=current_app.logger)
        summary = notifier.notify(body)
        return jsonify(summary.to_dict()), 200

    except NotifierError as e:
        if e.status_code >= 500:
            current_app.logger.error("Match notification failed: %s (%s)", e.message, e.details)
        else:
            current_app.logger.warning("Rejected match notification request: %s", e.message)
        return jsonify(e.to_dict()), e.status_code

    except Exception as e:
        current_app.logger.exception("Unexpected error while sending match notifications")
        return jsonify({'error': str(e) or 'Internal server error'}), 500
