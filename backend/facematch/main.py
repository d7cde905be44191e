from flask import Blueprint, request, jsonify, redirect, url_for
from flask_login import login_user, logout_user, login_required, current_user
from facematch import db
from facematch.models import User
from facematch.services.game.controller import dispose_session

main = Blueprint('main', __name__)

SIGNIN_FORM = (
    '<form action="/signin" method="post">'
    '<input name="username" placeholder="Username">'
    '<input name="password" type="password" placeholder="Password">'
    '<button type="submit">Sign in</button></form>'
)


def _credentials():
    data = request.get_json(silent=True) or request.form
    return data.get('username'), data.get('password')


@main.route('/')
def index():
    if current_user.is_authenticated:
        return redirect(url_for('game.play'))
    return redirect(url_for('main.signin'))


@main.route('/signin', methods=['GET', 'POST'])
def signin():
    if request.method == 'GET':
        return SIGNIN_FORM
    username, password = _credentials()
    user = User.query.filter_by(username=username).first() if username else None
    if user and password and user.check_password(password):
        login_user(user, remember=True)
        if request.is_json:
            return jsonify({"success": True, "user": user.to_dict()})
        return redirect(url_for('game.play'))
    if request.is_json:
        return jsonify({"success": False, "message": "Invalid credentials"}), 401
    return 'Invalid username or password. <a href="/signin">Try again</a>', 401


@main.route('/register', methods=['POST'])
def register():
    username, password = _credentials()
    if not username or not password:
        return jsonify({"success": False, "message": "Missing username or password"}), 400
    if User.query.filter_by(username=username).first():
        return jsonify({"success": False, "message": "Username already exists"}), 400

    new_user = User(username=username)
    new_user.set_password(password)
    db.session.add(new_user)
    db.session.commit()
    login_user(new_user)
    return jsonify({"success": True, "user": new_user.to_dict()}), 201


@main.route('/signout', methods=['GET', 'POST'])
@login_required
def signout():
    dispose_session(current_user)
    logout_user()
    return redirect(url_for('main.signin'))
