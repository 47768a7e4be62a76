from __future__ import annotations

import company.models
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200, unique=True)),
                (
                    "slug",
                    models.SlugField(
                        blank=True, max_length=220, null=True, unique=True
                    ),
                ),
                (
                    "industry",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                (
                    "location",
                    models.CharField(blank=True, default="", max_length=200),
                ),
                ("website", models.URLField(blank=True, default="", max_length=500)),
                ("description", models.TextField(blank=True, default="")),
                ("rating_average", models.FloatField(default=0.0)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                (
                    "rating_distribution",
                    models.JSONField(default=company.models.empty_distribution),
                ),
                (
                    "rating_updated_at",
                    models.DateTimeField(blank=True, null=True),
                ),
            ],
            options={
                "db_table": "company",
                "ordering": ["name"],
            },
        ),
    ]
