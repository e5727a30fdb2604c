from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import random
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS') or '*'

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import and register blueprints here
    from hijaiyyah.main import main
    flask_app.register_blueprint(main)

    from hijaiyyah.api.game import game
    # Mount game routes under /api to match frontend API client
    flask_app.register_blueprint(game, url_prefix='/api')

    from hijaiyyah.services.errors import ServiceError

    @flask_app.errorhandler(ServiceError)
    def handle_service_error(exc):
        return jsonify({'error': exc.message}), exc.status_code

    # Importing here ensures the handlers bind to the initialized socketio instance
    from hijaiyyah.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    from hijaiyyah.content import seed_content

    def _content_rng():
        seed = flask_app.config.get('CONTENT_SEED')
        return random.Random(seed) if seed is not None else None

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            counts = seed_content(rng=_content_rng())
            print(f"Database has been reset and seeded! {counts}")

    @click.command('seed-content')
    def seed_content_command():
        """Seeds letters, levels and questions if the content tables are empty."""
        with flask_app.app_context():
            counts = seed_content(rng=_content_rng())
            if counts:
                print(f"Seeded content: {counts}")
            else:
                print('Content already present, nothing to seed.')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(seed_content_command)

    return flask_app
