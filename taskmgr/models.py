import logging
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.types import Text, TypeDecorator

logger = logging.getLogger(__name__)

db = SQLAlchemy()


class DeadlineText(TypeDecorator):
    """Stores an aware datetime as ``YYYY-MM-DD HH:MM:SS+HH:MM`` text.

    ``None`` is written as NULL. Naive values are taken to be UTC.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat(sep=' ', timespec='seconds')

    def process_result_value(self, value, dialect):
        if not value:
            return None
        return datetime.fromisoformat(value)


class Task(db.Model):
    __tablename__ = 'tasks'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.Text, nullable=False)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    priority = db.Column(db.Integer, nullable=False)
    deadline = db.Column(DeadlineText)
    category = db.Column(db.Text, nullable=False, default='')

    def to_dict(self):
        return {
            'id': self.id,
            'description': self.description,
            'completed': self.completed,
            'priority': self.priority,
            'deadline': DeadlineText().process_bind_param(self.deadline, None),
            'category': self.category,
        }

    def __repr__(self):
        return f'<Task {self.id} {self.description!r}>'


def init_store(app):
    """Bind the store to ``app`` and create the tasks table if missing.

    Errors opening the database file or creating the schema propagate.
    """
    db.init_app(app)
    with app.app_context():
        db.create_all()
    logger.info("Task store ready at %s", app.config['SQLALCHEMY_DATABASE_URI'])
