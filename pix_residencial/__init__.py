from flask import Flask
from pix_residencial.routes.pix import pix_bp
from pix_residencial.error import register_erro_handlers
from pix_residencial.limitador import limiter


def create_app(config=None):
    app = Flask('PIX')

    if config:
        app.config.update(config)

    limiter.init_app(app)

    app.register_blueprint(pix_bp, url_prefix='/pix')

    register_erro_handlers(app)

    return app
