from django.db import models
from .role import Role
from apps.menus.models import Menu


class RoleMenu(models.Model):
    """
    Role - Menu 매핑 (역할별 메뉴/버튼 권한)
    """
    role = models.ForeignKey(
        Role,
        on_delete=models.CASCADE
    )
    menu = models.ForeignKey(
        Menu,
        on_delete=models.CASCADE
    )

    class Meta:
        db_table = "sys_role_menus"
        unique_together = ("role", "menu")
