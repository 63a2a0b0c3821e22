import logging

from flask import Flask
from config import Config
from pymysql import connect
from .extensions import cors, db, migrate, jwt
from .models import *
from .routes.cv_routes import cv_bp
from .commands import render_cv
from cvstudio.database.seed.seed_all import seed_all


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    # Allow CORS from the frontend
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("mysql"):
        create_database_if_not_exists(app.config)

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    app.register_blueprint(cv_bp, url_prefix="/api/cv")

    app.cli.add_command(seed_all)
    app.cli.add_command(render_cv)

    return app


def create_database_if_not_exists(config):
    host_parts = config["DB_HOST"].split(":")
    host = host_parts[0]
    port = int(host_parts[1]) if len(host_parts) > 1 else 3306

    logging.getLogger(__name__).info(
        "🔧 Ensuring database '%s' exists on %s:%s as '%s'",
        config["DB_NAME"], host, port, config["DB_USER"],
    )

    conn = connect(
        host=host,
        port=port,
        user=config["DB_USER"],
        password=config["DB_PASSWORD"] or "",
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{config['DB_NAME']}`")
        conn.commit()
    finally:
        conn.close()
