from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField
from wtforms.validators import DataRequired, Optional


class FoundItemForm(Form):
    """Validates a found item, whether posted inline or loaded from the item store"""

    id = StringField('Id', validators=[Optional()])

    user_id = StringField(
        'Reporter',
        validators=[DataRequired(message='Found item reporter (user_id) is required')]
    )

    category = StringField(
        'Category',
        validators=[DataRequired(message='Found item category is required')]
    )

    title = StringField('Title', validators=[Optional()])

    description = StringField('Description', validators=[Optional()])

    location = StringField('Location', validators=[Optional()])

    field_names = ('id', 'user_id', 'category', 'title', 'description', 'location')

    @classmethod
    def from_payload(cls, payload):
        # reporterId is what the web client sends, user_id is the column name
        data = dict(payload)
        if not data.get('user_id') and data.get('reporterId'):
            data['user_id'] = data['reporterId']
        formdata = MultiDict({
            key: str(value) for key, value in data.items()
            if key in cls.field_names and value is not None
        })
        return cls(formdata)

    def first_error(self):
        for errors in self.errors.values():
            if errors:
                return errors[0]
        return 'Invalid found item'
