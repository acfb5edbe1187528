from django.db import models
from .role import STATUS_CHOICES


# 부서 모델 (상위 부서 트리)
class Dept(models.Model):
    dept_name = models.CharField(max_length=128)
    parent = models.ForeignKey("self", related_name="sub_depts", on_delete=models.CASCADE, blank=True, null=True)
    sort = models.IntegerField(default=0)
    leader = models.CharField(max_length=64, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    status = models.CharField(max_length=1, choices=STATUS_CHOICES, default="0")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "sys_depts"
        ordering = ["sort", "id"]

    def __str__(self):
        return self.dept_name
