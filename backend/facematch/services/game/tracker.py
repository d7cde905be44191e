import json
import time
from typing import List, Optional

from facematch.errors import DivisionUndefinedError
from facematch.models import GameSession

# Minimum answered questions before a round can finish
MIN_ROUND_LENGTH = 4


def retry_ids(session: GameSession) -> List[int]:
    try:
        return list(json.loads(session.retry_queue)) if session.retry_queue else []
    except (TypeError, ValueError):
        return []


def set_retry_ids(session: GameSession, ids: List[int]) -> None:
    session.retry_queue = json.dumps(list(ids))


def pop_retry(session: GameSession) -> Optional[int]:
    ids = retry_ids(session)
    if not ids:
        return None
    front = ids.pop(0)
    set_retry_ids(session, ids)
    return front


def record_answer(session: GameSession, correct: bool) -> None:
    session.total_asked = (session.total_asked or 0) + 1
    if correct:
        session.correct_count = (session.correct_count or 0) + 1
    session.updated_at = time.time()


def skip_question(session: GameSession, photo_id: int) -> None:
    """Queue a photo to be asked again; counters are left untouched."""
    ids = retry_ids(session)
    ids.append(photo_id)
    set_retry_ids(session, ids)
    session.updated_at = time.time()


def score_percentage(session: GameSession) -> float:
    total = session.total_asked or 0
    if total == 0:
        raise DivisionUndefinedError('No questions answered yet.')
    return round((session.correct_count or 0) / total * 100, 2)


def is_round_complete(session: GameSession) -> bool:
    return (session.total_asked or 0) >= MIN_ROUND_LENGTH and not retry_ids(session)


def reset(session: GameSession) -> None:
    session.status = 'awaiting_question'
    session.total_asked = 0
    session.correct_count = 0
    session.retry_queue = None
    session.pending_photo_id = None
    session.pending_label = None
    session.updated_at = time.time()
