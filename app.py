#!/usr/bin/env python3
"""
FAQ Explorer Web Interface

Flask app serving the explorer's JSON API.
"""

from flask import Flask, jsonify

from config import load_settings
from logging_setup import setup_logging
from routes import explorer_bp
from routes.session_store import get_session

app = Flask(__name__)
app.register_blueprint(explorer_bp)


@app.route("/")
def index():
    """Corpus header plus the number of distinct categories."""
    session = get_session()
    loaded = session.snapshot
    summary = session.summary()
    summary["categories"] = len(loaded.model.unique_category_names()) if loaded else 0
    return jsonify(summary)


if __name__ == "__main__":
    settings = load_settings()
    setup_logging(settings.log_level)
    get_session()
    app.run(debug=True, port=settings.port)
