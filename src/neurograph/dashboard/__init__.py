"""Dashboard shell - orchestrates generation, selection and reset."""

from neurograph.dashboard.session import DashboardSession, Notification

__all__ = ["DashboardSession", "Notification"]
