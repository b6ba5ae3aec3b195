from datetime import datetime, timedelta, timezone

from sqlalchemy import text

from taskmgr.models import DeadlineText, Task, db


def test_deadline_written_in_fixed_text_format():
    column_type = DeadlineText()
    deadline = datetime(2025, 6, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))

    assert column_type.process_bind_param(deadline, None) == "2025-06-01 10:00:00+02:00"
    assert column_type.process_bind_param(None, None) is None


def test_naive_deadline_is_stored_as_utc():
    stored = DeadlineText().process_bind_param(datetime(2025, 6, 1, 10, 0), None)
    assert stored == "2025-06-01 10:00:00+00:00"


def test_empty_deadline_reads_back_as_none():
    column_type = DeadlineText()
    assert column_type.process_result_value(None, None) is None
    assert column_type.process_result_value('', None) is None


def test_schema_created_on_startup(app):
    with app.app_context():
        rows = db.session.execute(text("PRAGMA table_info(tasks)")).all()
    columns = [row[1] for row in rows]
    assert columns == ['id', 'description', 'completed', 'priority', 'deadline', 'category']


def test_to_dict(repo):
    task_id = repo.create("Water plants", 2, datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc), "home")
    task = repo.get(task_id)

    assert task.to_dict() == {
        'id': task_id,
        'description': "Water plants",
        'completed': False,
        'priority': 2,
        'deadline': "2025-06-01 10:00:00+00:00",
        'category': "home",
    }
    assert repr(task) == f"<Task {task_id} 'Water plants'>"
    assert isinstance(task, Task)
