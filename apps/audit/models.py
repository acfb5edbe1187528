from django.db import models


class LoginLog(models.Model):
    """로그인/로그아웃 감사 로그"""
    STATUS_CHOICES = (
        ("0", "성공"),
        ("1", "실패"),
    )

    username = models.CharField(max_length=64, blank=True, default="")
    ipaddr = models.GenericIPAddressField(null=True, blank=True)
    login_location = models.CharField(max_length=255, blank=True, default="")
    browser = models.CharField(max_length=255, blank=True, default="")
    os = models.CharField(max_length=255, blank=True, default="")
    platform = models.CharField(max_length=255, blank=True, default="")
    login_time = models.DateTimeField()
    status = models.CharField(max_length=1, choices=STATUS_CHOICES, default="0")
    remark = models.TextField(blank=True, default="")  # 원본 User-Agent
    msg = models.CharField(max_length=255, blank=True, default="")

    create_by = models.CharField(max_length=64, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'log_login'
        ordering = ['-login_time']

    def __str__(self):
        return f"{self.username} - {self.msg}"
