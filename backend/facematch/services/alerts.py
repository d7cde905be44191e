from facematch import socketio
from facematch.services import mailer

ALERT_RECIPIENT_KEY = 'familyEmail'
ALERT_SUBJECT = 'Alert: Low Score in Face Match Game'


def low_score_body(username: str, score: float) -> str:
    return (
        f"{username} scored {score:.2f}% in the face match game. "
        "Please check in with them."
    )


def dispatch_low_score_alert(app, user, score: float) -> None:
    """Send the low-score email as a one-shot background task.

    Delivery failures are logged and never propagate to the caller. Runs
    inline in TESTING mode.
    """
    user_id = user.id
    body = low_score_body(user.username, score)

    def _worker():
        with app.app_context():
            try:
                mailer.send_email(ALERT_RECIPIENT_KEY, ALERT_SUBJECT, body)
                app.logger.info(f"[alert-sent] user={user_id} score={score:.2f}")
            except Exception:
                app.logger.exception(f"[alert-failed] user={user_id} score={score:.2f}")

    if app.config.get('TESTING'):
        _worker()
    else:
        socketio.start_background_task(_worker)
