from flask import Blueprint, abort, jsonify, redirect, url_for

from taskmgr.models import db
from taskmgr.repository import TaskRepository

api = Blueprint('api', __name__, url_prefix='/api')


@api.route('/tasks', methods=['GET'])
def list_tasks():
    tasks = TaskRepository(db.session).list_all()
    return jsonify([task.to_dict() for task in tasks])


@api.route('/tasks/<int:task_id>', methods=['GET'])
def get_task(task_id):
    task = TaskRepository(db.session).get(task_id)
    if task is None:
        abort(404, description='Task not found')
    return jsonify(task.to_dict())


@api.route('/tasks/<int:task_id>/complete', methods=['POST'])
def complete_task(task_id):
    task = TaskRepository(db.session).toggle_completed(task_id)
    if task is None:
        abort(404, description='Task not found')
    return redirect(url_for('main.index'), code=303)
