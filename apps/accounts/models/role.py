from django.db import models

STATUS_CHOICES = (
    ("0", "정상"),
    ("1", "사용 중지"),
)


# Role 모델
class Role(models.Model):
    role_name = models.CharField(max_length=128)
    role_key = models.CharField(max_length=128, unique=True)  # admin, common, auditor ...
    sort = models.IntegerField(default=0)
    status = models.CharField(max_length=1, choices=STATUS_CHOICES, default="0")
    remark = models.CharField(max_length=255, blank=True, default="")

    create_by = models.CharField(max_length=64, blank=True, default="")
    update_by = models.CharField(max_length=64, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # 참고: Role-Menu 매핑은 RoleMenu 모델을 통해 관리됨
    # (apps/accounts/models/role_menu.py 참조)

    class Meta:
        db_table = "sys_roles"
        ordering = ["sort", "id"]

    def __str__(self):
        return self.role_name
