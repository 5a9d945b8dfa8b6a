"""
Navigation shell: role-conditional links and session controls.
"""

from rentease.schemas.navigation import NavigationResponse, NavLink, SessionControl
from rentease.services.session import Page, SessionState

PUBLIC_LINKS = [
    NavLink(label="Home", path="/"),
    NavLink(label="Properties", path="/properties"),
    NavLink(label="About", path="/about"),
    NavLink(label="Contact", path="/contact"),
]

OWNER_LINK = NavLink(label="Dashboard", path="/owner/dashboard")
ADMIN_LINK = NavLink(label="Admin", path="/admin/dashboard")


def build_navigation(state: SessionState) -> NavigationResponse:
    """Navigation for the given session state; recomputed on every render."""
    links = list(PUBLIC_LINKS)

    if state.can_access(Page.OWNER_DASHBOARD):
        links.append(OWNER_LINK)
    if state.can_access(Page.ADMIN_DASHBOARD):
        links.append(ADMIN_LINK)

    if state.is_authenticated:
        controls = [SessionControl(label="Logout", path="/auth/logout", method="POST")]
    else:
        controls = [
            SessionControl(label="Login", path="/auth"),
            SessionControl(label="Sign Up", path="/auth?mode=signup"),
        ]

    return NavigationResponse(links=links, controls=controls, is_authenticated=state.is_authenticated)
