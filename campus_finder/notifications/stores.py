"""
Item store and account directory backends.

Both backends answer the same three questions for the notifier:
which found item is this, which lost items share its category, and
what email address does an item owner have.
"""
import requests
from sqlalchemy.exc import SQLAlchemyError
from campus_finder import db
from campus_finder.auth.models import User
from campus_finder.errors import NotFoundError, UpstreamError
from campus_finder.lost_and_found.models import Category, Item, ItemStatus, ItemType

FOUND_ITEM_FIELDS = 'id,title,description,category,location,user_id'
LOST_ITEM_FIELDS = 'id,title,user_id,contact_info'


def _found_row(item):
    return {
        'id': item.id,
        'title': item.title,
        'description': item.description,
        'category': item.category.name if item.category else None,
        'location': item.location,
        'user_id': item.user_id,
    }


# ---------- SQL ---------- #
class SqlItemStore:
    """Items kept in our own database"""

    def get_found_item(self, item_id):
        try:
            pk = int(item_id)
        except (TypeError, ValueError):
            raise NotFoundError('Found item not found')

        try:
            item = db.session.get(Item, pk)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise UpstreamError('Failed querying found item', details=str(e))

        if not item or not item.is_found():
            raise NotFoundError('Found item not found')
        return _found_row(item)

    def find_lost_candidates(self, category, exclude_user_id):
        try:
            items = (
                Item.query
                .join(Category, Item.category_id == Category.id)
                .filter(
                    Item.type == ItemType.LOST.value,
                    Item.status == ItemStatus.ACTIVE.value,
                    Category.name == category,
                    Item.user_id != exclude_user_id,
                )
                .order_by(Item.created_at.asc(), Item.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            raise UpstreamError('Failed querying lost items', details=str(e))

        return [
            {
                'id': item.id,
                'title': item.title,
                'user_id': item.user_id,
                'contact_info': item.contact_info,
            }
            for item in items
        ]


class SqlAccountDirectory:
    def lookup_email(self, user_id):
        try:
            user = db.session.get(User, user_id)
        except SQLAlchemyError:
            # Leave the session usable for the next owner's lookup
            db.session.rollback()
            raise
        if not user or not user.is_active:
            return None
        return user.email


# ---------- Supabase ---------- #
class SupabaseClient:
    """Thin wrapper over the PostgREST and admin auth endpoints of a Supabase project"""

    def __init__(self, url, service_role_key):
        self.url = url.rstrip('/')
        self.service_role_key = service_role_key

    @property
    def headers(self):
        return {
            'apikey': self.service_role_key,
            'Authorization': f'Bearer {self.service_role_key}',
            'Accept': 'application/json',
        }

    def select(self, table, params):
        response = requests.get(f'{self.url}/rest/v1/{table}', headers=self.headers, params=params)
        response.raise_for_status()
        return response.json()

    def get_user(self, user_id):
        response = requests.get(f'{self.url}/auth/v1/admin/users/{user_id}', headers=self.headers)
        response.raise_for_status()
        return response.json()


def _error_details(e):
    response = getattr(e, 'response', None)
    if response is not None and response.text:
        return response.text
    return str(e)


class SupabaseItemStore:
    def __init__(self, client):
        self.client = client

    def get_found_item(self, item_id):
        try:
            rows = self.client.select('items', {
                'select': FOUND_ITEM_FIELDS,
                'id': f'eq.{item_id}',
                'type': f'eq.{ItemType.FOUND.value}',
                'limit': 1,
            })
        except (requests.exceptions.RequestException, ValueError) as e:
            raise UpstreamError('Failed querying found item', details=_error_details(e))

        if not rows:
            raise NotFoundError('Found item not found')
        return rows[0]

    def find_lost_candidates(self, category, exclude_user_id):
        params = {
            'select': LOST_ITEM_FIELDS,
            'type': f'eq.{ItemType.LOST.value}',
            'status': f'eq.{ItemStatus.ACTIVE.value}',
            'category': f'eq.{category}',
        }
        if exclude_user_id:
            params['user_id'] = f'neq.{exclude_user_id}'

        try:
            return self.client.select('items', params) or []
        except (requests.exceptions.RequestException, ValueError) as e:
            raise UpstreamError('Failed querying lost items', details=_error_details(e))


class SupabaseAccountDirectory:
    def __init__(self, client):
        self.client = client

    def lookup_email(self, user_id):
        data = self.client.get_user(user_id) or {}
        # Older GoTrue versions wrap the record in {"user": {...}}
        user = data.get('user') or data
        return user.get('email')
