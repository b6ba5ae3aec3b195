import re
from datetime import datetime, timezone

from flask import Blueprint, abort, redirect, render_template, request, url_for

from taskmgr.models import db
from taskmgr.repository import TaskRepository

main = Blueprint('main', __name__)

DEADLINE_INPUT_FORMAT = '%Y-%m-%dT%H:%M'
DEADLINE_INPUT_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}')
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

# Range of an SQLite INTEGER.
INTEGER_MIN, INTEGER_MAX = -2**63, 2**63 - 1


def _tasks():
    return TaskRepository(db.session)


def _check_description(description):
    # Only the empty string and a single space are refused.
    if description in ('', ' '):
        abort(400, description='Task description cannot be empty')
    return description


def parse_int(value):
    """Parse a plain decimal integer that fits an SQLite INTEGER column."""
    if not INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    number = int(value)
    if not INTEGER_MIN <= number <= INTEGER_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def parse_deadline(value):
    """Parse a ``datetime-local`` form value as a UTC instant, or None if blank."""
    if not value:
        return None
    if not DEADLINE_INPUT_PATTERN.fullmatch(value):
        raise ValueError(f"deadline not in YYYY-MM-DDTHH:MM form: {value!r}")
    return datetime.strptime(value, DEADLINE_INPUT_FORMAT).replace(tzinfo=timezone.utc)


@main.route('/')
def index():
    tasks = _tasks().list_all()
    return render_template('main/index.html', tasks=tasks)


@main.route('/add', methods=['POST'])
def add_task():
    description = _check_description(request.form.get('task', ''))

    try:
        priority = parse_int(request.form.get('priority', ''))
    except ValueError:
        abort(400, description='Invalid priority value')

    try:
        deadline = parse_deadline(request.form.get('deadline', ''))
    except ValueError:
        abort(400, description='Invalid deadline format')

    category = request.form.get('category', '')

    _tasks().create(description, priority, deadline, category)
    return redirect(url_for('main.index'), code=303)


@main.route('/delete/<int:task_id>', methods=['POST'])
def delete_task(task_id):
    _tasks().delete(task_id)
    return redirect(url_for('main.index'), code=303)


@main.route('/update/<int:task_id>')
def update_page(task_id):
    task = _tasks().get_partial(task_id)
    if task is None:
        abort(404, description='Task not found')
    return render_template('main/update.html', task=task)


@main.route('/update/submit/', methods=['POST'])
def update_task():
    # The id comes from the form body here, not the path.
    try:
        task_id = parse_int(request.form.get('id', ''))
    except ValueError:
        abort(400, description='Invalid task id')
    description = _check_description(request.form.get('task', ''))

    _tasks().update_description(task_id, description)
    return redirect(url_for('main.index'), code=303)
