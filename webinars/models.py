"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Webinar(models.Model):
    """Persistence model for webinars."""

    id = models.CharField(primary_key=True, max_length=255)
    organizer_id = models.CharField(max_length=255)
    title = models.CharField(max_length=255)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    seats = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_date"]
        indexes = [
            models.Index(fields=["organizer_id"], name="webinar_organizer_idx"),
        ]

    def __str__(self) -> str:
        return self.title
