# PATH: apps/domains/subscriptions/migrations/0001_initial.py
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SmsSubscription",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("name", models.CharField(blank=True, default="", max_length=50)),
                ("phone", models.CharField(db_index=True, max_length=20)),
            ],
            options={
                "db_table": "sms_subscriptions",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
