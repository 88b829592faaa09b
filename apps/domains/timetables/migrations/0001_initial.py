# PATH: apps/domains/timetables/migrations/0001_initial.py
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("teachers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Timetable",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("teacher_name", models.CharField(blank=True, default="", max_length=50)),
                ("teacher_image_url", models.URLField(blank=True, default="", max_length=500)),
                ("category", models.CharField(db_index=True, help_text="관/학년 구분 태그", max_length=50)),
                ("target_school", models.CharField(blank=True, default="", max_length=100)),
                ("subject", models.CharField(blank=True, default="", max_length=50)),
                ("class_name", models.CharField(max_length=200)),
                ("class_time", models.CharField(blank=True, default="", max_length=100)),
                ("class_date", models.CharField(blank=True, default="", help_text="개강일 (표시용)", max_length=100)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "teacher",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="timetables",
                        to="teachers.teacher",
                    ),
                ),
            ],
            options={
                "db_table": "timetables",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
