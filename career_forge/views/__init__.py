"""
Streamlit views. Each page takes the session's SharedState and renders
one tool.
"""

from .dashboard import dashboard_page
from .pathfinder_page import pathfinder_page
from .resume_page import resume_page
from .learning_hub_page import learning_hub_page

__all__ = [
    "dashboard_page",
    "pathfinder_page",
    "resume_page",
    "learning_hub_page",
]
