import pytest

from config import TestConfig
from campus_finder import create_app, db
from campus_finder.auth.models import User
from campus_finder.lost_and_found.models import Category, Item


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    """Finder u1 reports an iPhone; u2 and u3 lost electronics, u4 lost a book."""
    electronics = Category(name='Electronics', description='Phones, laptops, chargers')
    books = Category(name='Books', description='Textbooks and novels')
    db.session.add_all([electronics, books])

    db.session.add_all([
        User(id='u1', email='finder@campus.edu', name='Finder'),
        User(id='u2', email='u2-account@campus.edu', name='Owner Two'),
        User(id='u3', email='c@d.com', name='Owner Three'),
        User(id='u4', email='reader@campus.edu', name='Reader'),
        User(id='u5', email='gone@campus.edu', name='Inactive', is_active=False),
    ])
    db.session.flush()

    found = Item(type='found', status='active', title='iPhone 13', category_id=electronics.id,
                 user_id='u1', description='Blue case', location='Library', contact_info='finder@campus.edu')
    items = {
        'found': found,
        'lost_u2': Item(type='lost', status='active', title='My phone', category_id=electronics.id,
                        user_id='u2', contact_info='a@b.com'),
        'lost_u3': Item(type='lost', status='active', title='Black iPhone', category_id=electronics.id,
                        user_id='u3', contact_info=None),
        'lost_by_finder': Item(type='lost', status='active', title='Charger', category_id=electronics.id,
                               user_id='u1', contact_info='finder@campus.edu'),
        'lost_resolved': Item(type='lost', status='resolved', title='Old laptop', category_id=electronics.id,
                              user_id='u4', contact_info='reader@campus.edu'),
        'lost_book': Item(type='lost', status='active', title='Calculus textbook', category_id=books.id,
                          user_id='u4', contact_info='reader@campus.edu'),
    }
    db.session.add_all(items.values())
    db.session.commit()
    return items


class FakeResponse:
    def __init__(self, status_code=200, text=''):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400


@pytest.fixture
def fake_response():
    return FakeResponse
