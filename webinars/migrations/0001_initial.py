from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Webinar",
            fields=[
                ("id", models.CharField(max_length=255, primary_key=True, serialize=False)),
                ("organizer_id", models.CharField(max_length=255)),
                ("title", models.CharField(max_length=255)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("seats", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["start_date"],
                "indexes": [
                    models.Index(fields=["organizer_id"], name="webinar_organizer_idx"),
                ],
            },
        ),
    ]
