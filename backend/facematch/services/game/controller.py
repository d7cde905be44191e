"""Serve / check / skip / score transitions for a single player's session.

Each authenticated player owns one GameSession row. Transitions:
awaiting_question -> question_served -> (checked | skipped) ->
awaiting_question | finished. Serving again after ``finished`` starts a new
round.
"""

import time
from typing import Dict, Any, List, Optional, Tuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from facematch import db, socketio
from facematch.errors import NoQuestionServedError, StorageError, DivisionUndefinedError
from facematch.models import GameSession, Photo
from facematch.services.alerts import dispatch_low_score_alert
from facematch.socketio_events import player_room
from facematch.services.photos import list_photos_for_user, get_photo_by_id
from . import tracker
from .selector import next_question


def _commit() -> None:
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError(f"Error saving game session: {exc}") from exc


def find_session(user) -> Optional[GameSession]:
    return GameSession.query.filter_by(user_id=user.id).first()


def get_or_create_session(user) -> GameSession:
    session = find_session(user)
    if session is None:
        session = GameSession(user_id=user.id)
        tracker.reset(session)
        db.session.add(session)
        _commit()
        return session

    max_age = int(current_app.config.get('SESSION_MAX_AGE_SEC', 0) or 0)
    if max_age > 0 and session.updated_at and time.time() - session.updated_at > max_age:
        current_app.logger.info(f"[expire] user={user.id} idle session reset")
        tracker.reset(session)
        _commit()
    return session


def serve_question(user) -> Tuple[Photo, List[Photo]]:
    session = get_or_create_session(user)
    if session.status == 'finished':
        tracker.reset(session)

    photos = list_photos_for_user(user.id)
    by_id = {p.id: p for p in photos}

    # Photos deleted since they were skipped are dropped from the queue
    queue = [by_id[pid] for pid in tracker.retry_ids(session) if pid in by_id]
    # Reloading an unanswered question serves the same photo again
    if session.status == 'question_served' and session.pending_photo_id in by_id:
        queue.insert(0, by_id[session.pending_photo_id])
    target, choices = next_question(
        photos, queue, min_photos=int(current_app.config.get('MIN_PHOTOS', 4))
    )
    tracker.set_retry_ids(session, [p.id for p in queue])

    session.pending_photo_id = target.id
    session.pending_label = target.label
    session.status = 'question_served'
    session.updated_at = time.time()
    _commit()
    current_app.logger.info(f"[serve] user={user.id} photo={target.id} retry={len(queue)}")
    return target, choices


def check_answer(user, guess) -> Dict[str, Any]:
    session = find_session(user)
    if session is None or session.status != 'question_served':
        raise NoQuestionServedError('There is no question to answer right now.')

    # A missing photo leaves the current question in place
    guessed = get_photo_by_id(guess, user_id=user.id)
    correct = guessed.label == session.pending_label
    tracker.record_answer(session, correct)
    session.pending_photo_id = None
    session.pending_label = None

    finished = tracker.is_round_complete(session)
    session.status = 'finished' if finished else 'awaiting_question'
    _commit()
    current_app.logger.info(
        f"[check] user={user.id} correct={correct} asked={session.total_asked} right={session.correct_count}"
    )

    score = tracker.score_percentage(session)
    alerted = False
    if finished:
        current_app.logger.info(f"[finish] user={user.id} score={score:.2f}")
        if score < float(current_app.config.get('ALERT_THRESHOLD_PERCENT', 50)):
            dispatch_low_score_alert(current_app._get_current_object(), user, score)
            alerted = True

    socketio.emit('score_update', {
        'total_asked': session.total_asked,
        'correct_count': session.correct_count,
        'status': session.status,
        'score': score,
    }, to=player_room(user.id), namespace='/ws')

    return {'correct': correct, 'finished': finished, 'score': score, 'alerted': alerted}


def skip_current(user) -> None:
    session = find_session(user)
    if session is None or session.status != 'question_served' or session.pending_photo_id is None:
        raise NoQuestionServedError('There is no question to skip right now.')

    tracker.skip_question(session, session.pending_photo_id)
    session.pending_photo_id = None
    session.pending_label = None
    session.status = 'awaiting_question'
    _commit()
    current_app.logger.info(f"[skip] user={user.id} queued={len(tracker.retry_ids(session))}")


def current_score(user) -> Dict[str, Any]:
    session = find_session(user)
    if session is None:
        raise DivisionUndefinedError('No questions answered yet.')
    return {
        'score': tracker.score_percentage(session),
        'finished': session.status == 'finished',
        'total_asked': session.total_asked,
        'correct_count': session.correct_count,
    }


def dispose_session(user) -> None:
    session = find_session(user)
    if session is None:
        return
    db.session.delete(session)
    _commit()
