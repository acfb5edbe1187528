from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LoginLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("username", models.CharField(blank=True, default="", max_length=64)),
                ("ipaddr", models.GenericIPAddressField(blank=True, null=True)),
                ("login_location", models.CharField(blank=True, default="", max_length=255)),
                ("browser", models.CharField(blank=True, default="", max_length=255)),
                ("os", models.CharField(blank=True, default="", max_length=255)),
                ("platform", models.CharField(blank=True, default="", max_length=255)),
                ("login_time", models.DateTimeField()),
                ("status", models.CharField(choices=[("0", "성공"), ("1", "실패")], default="0", max_length=1)),
                ("remark", models.TextField(blank=True, default="")),
                ("msg", models.CharField(blank=True, default="", max_length=255)),
                ("create_by", models.CharField(blank=True, default="", max_length=64)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "log_login",
                "ordering": ["-login_time"],
            },
        ),
    ]
