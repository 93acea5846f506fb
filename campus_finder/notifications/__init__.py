from flask import Blueprint

notifications = Blueprint('notifications', __name__)

from campus_finder.notifications import routes  # noqa: E402,F401
