import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, NotFound

from taskmgr.models import db

logger = logging.getLogger(__name__)


def handle_http_error(error):
    response = error.get_response()
    message = error.description
    if isinstance(error, NotFound) and message == NotFound.description:
        message = current_app.config['NOT_FOUND_MESSAGE']
    response.set_data(str(message))
    response.content_type = 'text/plain; charset=utf-8'
    return response


def handle_store_error(error):
    db.session.rollback()
    logger.error("Store error while handling request", exc_info=error)
    return 'Internal Server Error', 500, {'Content-Type': 'text/plain; charset=utf-8'}


def register_error_handlers(app):
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(SQLAlchemyError, handle_store_error)
