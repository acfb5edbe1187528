import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Menu",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("menu_name", models.CharField(max_length=128)),
                ("title", models.CharField(blank=True, default="", max_length=128)),
                ("sort", models.IntegerField(default=0)),
                ("icon", models.CharField(blank=True, default="", max_length=128)),
                ("path", models.CharField(blank=True, default="", max_length=255)),
                ("component", models.CharField(blank=True, default="", max_length=255)),
                ("menu_type", models.CharField(choices=[("M", "디렉터리"), ("C", "메뉴"), ("F", "버튼")], default="C", max_length=1)),
                ("permission", models.CharField(blank=True, default="", max_length=255)),
                ("is_link", models.CharField(blank=True, default="", max_length=255)),
                ("is_hide", models.CharField(default="0", max_length=1)),
                ("is_keep_alive", models.CharField(default="1", max_length=1)),
                ("is_affix", models.CharField(default="1", max_length=1)),
                ("is_frame", models.CharField(default="1", max_length=1)),
                ("status", models.CharField(choices=[("0", "정상"), ("1", "사용 중지")], default="0", max_length=1)),
                ("create_by", models.CharField(blank=True, default="", max_length=64)),
                ("update_by", models.CharField(blank=True, default="", max_length=64)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="sub_menus", to="menus.menu")),
            ],
            options={
                "db_table": "sys_menus",
                "ordering": ["sort", "id"],
            },
        ),
    ]
