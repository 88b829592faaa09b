# PATH: apps/domains/members/migrations/0001_initial.py
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Member",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("username", models.CharField(max_length=15, unique=True)),
                ("password", models.CharField(max_length=128)),
                (
                    "member_type",
                    models.CharField(
                        choices=[("student", "학생"), ("parent", "학부모")],
                        default="student",
                        max_length=10,
                    ),
                ),
                ("student_name", models.CharField(max_length=50)),
                ("gender", models.CharField(max_length=10)),
                ("track", models.CharField(help_text="계열 (문과/이과/예체능)", max_length=20)),
                ("grade", models.CharField(max_length=10)),
                ("school", models.CharField(max_length=100)),
                ("student_phone", models.CharField(blank=True, default="", max_length=20)),
                ("parent_phone", models.CharField(max_length=20)),
                ("birthday", models.CharField(blank=True, default="", max_length=20)),
                ("subject", models.CharField(blank=True, default="", max_length=50)),
                ("email", models.EmailField(blank=True, default="", max_length=254)),
                (
                    "academy_status",
                    models.CharField(
                        choices=[("none", "없음"), ("former", "재원 했었음"), ("current", "재원 중")],
                        default="none",
                        max_length=10,
                    ),
                ),
            ],
            options={
                "db_table": "members",
                "ordering": ["-id"],
            },
        ),
    ]
