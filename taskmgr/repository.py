import logging

from sqlalchemy import delete, select, update
from sqlalchemy.orm import load_only

from taskmgr.models import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """Task queries against an explicit SQLAlchemy session.

    Every operation is one statement. Store errors are not caught here;
    the request layer rolls back and answers 500.
    """

    def __init__(self, session):
        self.session = session

    def list_all(self):
        return list(self.session.scalars(select(Task).order_by(Task.id)))

    def create(self, description, priority, deadline=None, category=''):
        task = Task(description=description, completed=False, priority=priority,
                    deadline=deadline, category=category)
        self.session.add(task)
        self.session.commit()
        logger.info("Created task %s", task.id)
        return task.id

    def get(self, task_id):
        return self.session.get(Task, task_id)

    def get_partial(self, task_id):
        # Only id, description and completed are loaded; touching any other
        # attribute raises instead of issuing a second query.
        stmt = (
            select(Task)
            .options(load_only(Task.id, Task.description, Task.completed, raiseload=True))
            .where(Task.id == task_id)
        )
        return self.session.scalars(stmt).one_or_none()

    def update_description(self, task_id, description):
        self.session.execute(
            update(Task).where(Task.id == task_id).values(description=description)
        )
        self.session.commit()
        logger.debug("Updated description of task %s", task_id)

    def delete(self, task_id):
        self.session.execute(delete(Task).where(Task.id == task_id))
        self.session.commit()
        logger.info("Deleted task %s", task_id)

    def toggle_completed(self, task_id):
        task = self.session.get(Task, task_id)
        if task is None:
            return None
        task.completed = not task.completed
        self.session.commit()
        return task
