"""Default settings for the task manager.

Values are overridden by ``TASKMGR_*`` environment variables, e.g.
``TASKMGR_DATABASE_PATH=/var/lib/taskmgr/tasks.db`` or ``TASKMGR_PORT=9000``.
"""


class DefaultConfig:
    # None means ``tasks.db`` next to the application package.
    DATABASE_PATH = None
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    NOT_FOUND_MESSAGE = '404 Page Not Found'

    HOST = '127.0.0.1'
    PORT = 8080
    LOG_LEVEL = 'INFO'


def database_uri(path):
    return f"sqlite:///{path}"
