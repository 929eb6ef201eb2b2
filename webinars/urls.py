from django.urls import path

from webinars.handlers import ChangeSeatsView, OrganizeWebinarView

urlpatterns = [
    path("webinars", OrganizeWebinarView.as_view(), name="webinar-organize"),
    path(
        "webinars/<str:webinar_id>/seats",
        ChangeSeatsView.as_view(),
        name="webinar-change-seats",
    ),
]
