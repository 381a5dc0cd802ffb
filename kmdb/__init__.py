import logging

from flask import Flask

from kmdb.config import config
from kmdb.errors import register_error_handlers
from kmdb.models import db, register_sqlite_functions
from kmdb.routes import routes
from kmdb.schemas import ma


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)
    ma.init_app(app)

    app.register_blueprint(routes)
    register_error_handlers(app)

    with app.app_context():
        register_sqlite_functions(db.engine)
        db.create_all()

    app.logger.info("kmdb started with %s", (config_object or config).__name__)
    return app
