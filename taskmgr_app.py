import logging
import sys
from pathlib import Path

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from taskmgr.api.routes import api
from taskmgr.config import DefaultConfig, database_uri
from taskmgr.errors import register_error_handlers
from taskmgr.logging_setup import setup_logging
from taskmgr.main.routes import main as main_blueprint
from taskmgr.models import init_store

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__, template_folder='taskmgr/templates', static_folder='taskmgr/static')

    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env('TASKMGR')
    if test_config is not None:
        app.config.from_mapping(test_config)

    if not app.config.get('DATABASE_PATH'):
        app.config['DATABASE_PATH'] = str(Path(app.root_path) / "tasks.db")
    app.config.setdefault('SQLALCHEMY_DATABASE_URI', database_uri(app.config['DATABASE_PATH']))

    app.register_blueprint(api)
    app.register_blueprint(main_blueprint)
    register_error_handlers(app)

    init_store(app)
    return app


def main():
    setup_logging()
    try:
        app = create_app()
    except SQLAlchemyError:
        logger.critical("Could not open the task store", exc_info=True)
        sys.exit(1)

    logging.getLogger().setLevel(app.config['LOG_LEVEL'])
    logger.info("Listening at http://%s:%s", app.config['HOST'], app.config['PORT'])
    app.run(host=app.config['HOST'], port=int(app.config['PORT']))


if __name__ == '__main__':
    main()
