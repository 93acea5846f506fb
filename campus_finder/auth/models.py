from sqlalchemy import func
from campus_finder import db


class User(db.Model):
    __tablename__ = 'users'

    # Subject id issued by the identity provider
    id = db.Column(db.String(64), primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    name = db.Column(db.String(150), nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    items_reported = db.relationship('Item', back_populates='owner', lazy='select')

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'is_active': self.is_active,
            'created_at': self.created_at.strftime('%Y-%m-%d') if self.created_at else None,
        }
