try:
    from backend.mindmatch.server import create_app
except ImportError:  # pragma: no cover
    from mindmatch.server import create_app

app, socketio = create_app()
