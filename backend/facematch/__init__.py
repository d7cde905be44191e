from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

DEMO_LABELS = ['Alice', 'Bob', 'Carol', 'Dave']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    login_manager.login_view = 'main.signin'
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from facematch.main import main
    flask_app.register_blueprint(main)

    from facematch.game import game
    flask_app.register_blueprint(game)

    from facematch.api.photos import photos
    flask_app.register_blueprint(photos, url_prefix='/api/photos')

    from facematch.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    from facematch.models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    if flask_app.config.get('AUTO_CREATE_TABLES'):
        # Idempotent: only missing tables are created
        with flask_app.app_context():
            db.create_all()

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from facematch.models import Photo
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            user = User(username='demo')
            user.set_password('password')
            db.session.add(user)
            db.session.flush()
            for label in DEMO_LABELS:
                db.session.add(Photo(
                    url=f'https://picsum.photos/seed/{label.lower()}/200',
                    label=label,
                    user_id=user.id,
                ))

            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
