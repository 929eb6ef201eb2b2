from webinars.handlers.views import ChangeSeatsView, OrganizeWebinarView

__all__ = ["ChangeSeatsView", "OrganizeWebinarView"]
