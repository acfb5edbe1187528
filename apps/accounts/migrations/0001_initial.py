import django.db.models.deletion
from django.db import migrations, models


STATUS_CHOICES = [("0", "정상"), ("1", "사용 중지")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
        ("menus", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Role",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role_name", models.CharField(max_length=128)),
                ("role_key", models.CharField(max_length=128, unique=True)),
                ("sort", models.IntegerField(default=0)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="0", max_length=1)),
                ("remark", models.CharField(blank=True, default="", max_length=255)),
                ("create_by", models.CharField(blank=True, default="", max_length=64)),
                ("update_by", models.CharField(blank=True, default="", max_length=64)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "sys_roles",
                "ordering": ["sort", "id"],
            },
        ),
        migrations.CreateModel(
            name="Dept",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("dept_name", models.CharField(max_length=128)),
                ("sort", models.IntegerField(default=0)),
                ("leader", models.CharField(blank=True, default="", max_length=64)),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("email", models.EmailField(blank=True, default="", max_length=254)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="0", max_length=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="sub_depts", to="accounts.dept")),
            ],
            options={
                "db_table": "sys_depts",
                "ordering": ["sort", "id"],
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("post_name", models.CharField(max_length=128)),
                ("post_code", models.CharField(max_length=64, unique=True)),
                ("sort", models.IntegerField(default=0)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="0", max_length=1)),
                ("remark", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "sys_posts",
                "ordering": ["sort", "id"],
            },
        ),
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("username", models.CharField(max_length=64, unique=True)),
                ("nick_name", models.CharField(blank=True, default="", max_length=128)),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("email", models.EmailField(blank=True, default="", max_length=254)),
                ("sex", models.CharField(choices=[("0", "남"), ("1", "여"), ("2", "알 수 없음")], default="2", max_length=1)),
                ("avatar", models.CharField(blank=True, default="", max_length=255)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="0", max_length=1)),
                ("is_staff", models.BooleanField(default=False)),
                ("role_ids", models.CharField(blank=True, default="", max_length=255)),
                ("post_ids", models.CharField(blank=True, default="", max_length=255)),
                ("remark", models.CharField(blank=True, default="", max_length=255)),
                ("create_by", models.CharField(blank=True, default="", max_length=64)),
                ("update_by", models.CharField(blank=True, default="", max_length=64)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("failed_login_count", models.PositiveIntegerField(default=0)),
                ("is_locked", models.BooleanField(default=False)),
                ("locked_at", models.DateTimeField(blank=True, null=True)),
                ("last_login_ip", models.GenericIPAddressField(blank=True, null=True)),
                ("dept", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to="accounts.dept")),
                ("post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to="accounts.post")),
                ("role", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to="accounts.role")),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "db_table": "sys_users",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="RoleMenu",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("menu", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="menus.menu")),
                ("role", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="accounts.role")),
            ],
            options={
                "db_table": "sys_role_menus",
                "unique_together": {("role", "menu")},
            },
        ),
    ]
