# PATH: apps/domains/verification/migrations/0001_initial.py
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PhoneVerification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("phone", models.CharField(db_index=True, max_length=20)),
                ("code", models.CharField(max_length=6)),
                ("expires_at", models.DateTimeField()),
                ("verified", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "phone_verifications",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.AddConstraint(
            model_name="phoneverification",
            constraint=models.UniqueConstraint(
                condition=models.Q(("verified", False)),
                fields=("phone",),
                name="phone_verifications_one_active_per_phone",
            ),
        ),
    ]
