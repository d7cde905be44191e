from flask import Blueprint, request, redirect, url_for, current_app
from flask_login import login_required, current_user
from markupsafe import escape

from facematch.errors import (
    StorageError,
    PhotoNotFoundError,
    InsufficientDataError,
    DivisionUndefinedError,
    NoQuestionServedError,
)
from facematch.services.game import controller

game = Blueprint('game', __name__)


def _render_question(target, choices) -> str:
    html = f"<p>Who is {escape(target.label)}?</p>"
    for photo in choices:
        html += (
            f'<img src="{escape(photo.url)}" width="100">'
            f'<form action="{url_for("game.check")}" method="post">'
            f'<input type="hidden" name="guess" value="{photo.id}">'
            '<button type="submit">Select</button></form>'
        )
    html += f'<form action="{url_for("game.skip")}" method="post"><button type="submit">Skip</button></form>'
    return html


@game.route('/game', methods=['GET'])
@login_required
def play():
    try:
        target, choices = controller.serve_question(current_user)
    except InsufficientDataError as exc:
        return exc.message, exc.status_code, {'Content-Type': 'text/plain; charset=utf-8'}
    except StorageError as exc:
        current_app.logger.error(f"[serve-error] user={current_user.id} {exc.message}")
        return exc.message, exc.status_code, {'Content-Type': 'text/plain; charset=utf-8'}
    return _render_question(target, choices)


@game.route('/check', methods=['POST'])
@login_required
def check():
    data = request.get_json(silent=True) or request.form
    guess = data.get('guess')
    try:
        result = controller.check_answer(current_user, guess)
    except PhotoNotFoundError as exc:
        return f'{exc.message} <a href="{url_for("game.play")}">Try again</a>', exc.status_code
    except NoQuestionServedError as exc:
        return f'{exc.message} <a href="{url_for("game.play")}">Get a question</a>', exc.status_code
    except StorageError as exc:
        current_app.logger.error(f"[check-error] user={current_user.id} {exc.message}")
        return f'{exc.message} <a href="{url_for("game.play")}">Try again</a>', exc.status_code
    if result['finished']:
        return redirect(url_for('game.score'))
    return redirect(url_for('game.play'))


@game.route('/skip', methods=['POST'])
@login_required
def skip():
    try:
        controller.skip_current(current_user)
    except NoQuestionServedError as exc:
        return f'{exc.message} <a href="{url_for("game.play")}">Get a question</a>', exc.status_code
    except StorageError as exc:
        return f'{exc.message} <a href="{url_for("game.play")}">Try again</a>', exc.status_code
    return redirect(url_for('game.play'))


@game.route('/score', methods=['GET'])
@login_required
def score():
    try:
        report = controller.current_score(current_user)
    except DivisionUndefinedError as exc:
        return f'{exc.message} <a href="{url_for("game.play")}">Start playing</a>'
    kind = 'final' if report['finished'] else 'current'
    return f'Your {kind} score is {report["score"]:.2f}%. <a href="{url_for("game.play")}">Play again</a>'
