# portfolio\core\use_cases\__init__.py
"""
Application Use Cases (Interactors).

Each one composes the data a single page needs from the content Port,
or forwards one visitor submission to it.
"""

from .build_about_page import BuildAboutPage
from .build_home_page import BuildHomePage
from .get_insight import AddComment, GetInsight
from .get_project import GetProjectDetail
from .list_insights import ListInsights
from .list_projects import ListPublishedProjects
from .load_dashboard import LoadDashboard
from .send_contact_message import SendContactMessage

__all__ = [
    "AddComment",
    "BuildAboutPage",
    "BuildHomePage",
    "GetInsight",
    "GetProjectDetail",
    "ListInsights",
    "ListPublishedProjects",
    "LoadDashboard",
    "SendContactMessage",
]
