"""
Flask blueprints for the FAQ explorer API.
"""

from flask import Blueprint

# Create blueprints
explorer_bp = Blueprint('explorer', __name__)
# Import routes to register them
from . import view  # noqa: E402, F401
