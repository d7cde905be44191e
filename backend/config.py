import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///alzheimer-helper.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Create missing tables on startup (CREATE TABLE IF NOT EXISTS semantics)
    AUTO_CREATE_TABLES = os.environ.get('AUTO_CREATE_TABLES', 'true').lower() == 'true'
    PORT = int(os.environ.get('PORT', '3001'))
    CORS_ORIGINS = [o for o in os.environ.get('CORS_ORIGINS', 'http://localhost:5173').split(',') if o]
    # Game policy
    MIN_PHOTOS = int(os.environ.get('MIN_PHOTOS', '4'))
    ALERT_THRESHOLD_PERCENT = float(os.environ.get('ALERT_THRESHOLD_PERCENT', '50'))
    # Idle game sessions older than this are reset on the next visit (sec). 0 disables.
    SESSION_MAX_AGE_SEC = int(os.environ.get('SESSION_MAX_AGE_SEC', '86400'))
    # Alert email delivery
    ALERT_RECIPIENTS = {
        'familyEmail': os.environ.get('FAMILY_EMAIL'),
    }
    MAIL_SENDER = os.environ.get('MAIL_SENDER') or os.environ.get('SMTP_USER')
    SMTP_HOST = os.environ.get('SMTP_HOST')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', '587'))
    SMTP_USER = os.environ.get('SMTP_USER')
    SMTP_PASS = os.environ.get('SMTP_PASS')
    SMTP_USE_TLS = os.environ.get('SMTP_USE_TLS', 'true').lower() == 'true'
