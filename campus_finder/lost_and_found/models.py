from sqlalchemy import func, Index, CheckConstraint
from campus_finder import db
import enum


# ---------- Enums ---------- #
class ItemType(enum.Enum):
    LOST = 'lost'
    FOUND = 'found'


class ItemStatus(enum.Enum):
    ACTIVE = 'active'
    RESOLVED = 'resolved'
    ARCHIVED = 'archived'


# ---------- Category ---------- #
class Category(db.Model):
    __tablename__ = 'categories'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)

    items = db.relationship('Item', back_populates='category', lazy='select')

    def __repr__(self):
        return f"<Category id={self.id} name={self.name}>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description
        }


# ---------- Item ---------- #
class Item(db.Model):
    __tablename__ = 'items'
    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(10), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default=ItemStatus.ACTIVE.value, index=True)
    title = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text)
    location = db.Column(db.String(255), nullable=True)
    # Free text: an email address, a phone number, a room...
    contact_info = db.Column(db.String(255), nullable=True)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False, index=True)
    user_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    created_at = db.Column(
        db.DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    # Relationships
    owner = db.relationship('User', back_populates='items_reported', lazy='joined')
    category = db.relationship('Category', back_populates='items', lazy='joined')

    __table_args__ = (
        Index('ix_items_type_status_category', 'type', 'status', 'category_id'),
        Index('ix_items_user_created', 'user_id', 'created_at'),
        CheckConstraint(
            "type IN ('lost', 'found')",
            name='ck_items_valid_type'
        ),
        CheckConstraint(
            "status IN ('active', 'resolved', 'archived')",
            name='ck_items_valid_status'
        ),
    )

    def __repr__(self):
        return f"<Item id={self.id} title={self.title!r} type={self.type} status={self.status}>"

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'status': self.status,
            'title': self.title,
            'description': self.description,
            'location': self.location,
            'contact_info': self.contact_info,
            'category_id': self.category_id,
            'category': self.category.name if self.category else None,
            'user_id': self.user_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def is_lost(self):
        return self.type == ItemType.LOST.value

    def is_found(self):
        return self.type == ItemType.FOUND.value
