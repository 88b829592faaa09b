# PATH: apps/domains/teachers/migrations/0001_initial.py
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Teacher",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=50)),
                ("subject", models.CharField(max_length=50)),
                ("description", models.CharField(help_text="한줄 소개", max_length=255)),
                ("division", models.CharField(blank=True, db_index=True, default="", max_length=20)),
                ("image_url", models.URLField(blank=True, default="", max_length=500)),
            ],
            options={
                "db_table": "teachers",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
