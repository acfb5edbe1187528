from django.db import models
from .role import STATUS_CHOICES


# 직위(Post) 모델
class Post(models.Model):
    post_name = models.CharField(max_length=128)
    post_code = models.CharField(max_length=64, unique=True)
    sort = models.IntegerField(default=0)
    status = models.CharField(max_length=1, choices=STATUS_CHOICES, default="0")
    remark = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "sys_posts"
        ordering = ["sort", "id"]

    def __str__(self):
        return self.post_name
