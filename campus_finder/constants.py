ITEM_TYPES = {'lost', 'found'}
ITEM_STATUSES = {'active', 'resolved', 'archived'}
ITEM_STORES = {'sql', 'supabase'}
EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
DEFAULT_FROM_EMAIL = 'notifications@no-reply.local'
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
}
