from facematch import db, bcrypt
from flask_login import UserMixin
import json
import time


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }


class Photo(db.Model):
    # Table and column names are shared with the upload service
    __tablename__ = 'Photos'
    __table_args__ = {'sqlite_autoincrement': True}
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    url = db.Column(db.Text)
    label = db.Column(db.Text)
    user_id = db.Column('userId', db.Integer, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'url': self.url,
            'label': self.label,
            'user_id': self.user_id,
        }


class GameSession(db.Model):
    __tablename__ = 'game_session'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), unique=True, nullable=False, index=True)
    status = db.Column(db.String(32), default='awaiting_question', nullable=False)  # awaiting_question, question_served, finished
    total_asked = db.Column(db.Integer, default=0, nullable=False)
    correct_count = db.Column(db.Integer, default=0, nullable=False)
    retry_queue = db.Column(db.Text, nullable=True)  # JSON-encoded list of photo ids, front first
    pending_photo_id = db.Column(db.Integer, nullable=True)
    pending_label = db.Column(db.Text, nullable=True)
    updated_at = db.Column(db.Float, default=time.time, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'status': self.status,
            'total_asked': self.total_asked,
            'correct_count': self.correct_count,
            'retry_queue': json.loads(self.retry_queue) if self.retry_queue else [],
            'pending_photo_id': self.pending_photo_id,
        }
