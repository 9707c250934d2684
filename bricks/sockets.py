import logging

from flask import request
from flask_jwt_extended import decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from flask_socketio import join_room
from jwt.exceptions import PyJWTError

from bricks.extensions import socketio
from bricks.services.notifications import user_room

logger = logging.getLogger(__name__)


@socketio.on("connect")
def handle_connect(auth=None):
    """Join the user's private room; connections without a valid token are refused."""
    token = (auth or {}).get("token") or request.args.get("token")
    if not token:
        return False
    try:
        claims = decode_token(token)
    except (JWTExtendedException, PyJWTError) as e:
        logger.warning("Socket connection refused: %s", e)
        return False
    join_room(user_room(claims["sub"]))
    return True
