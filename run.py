import eventlet
eventlet.monkey_patch()

import os

from bricks import create_app
from bricks.extensions import socketio

app = create_app()

if __name__ == '__main__':
    socketio.run(app, debug=app.config.get("DEBUG", False), port=int(os.getenv("PORT", 5000)))
