from django.db import models
from django.contrib.auth.models import(
    BaseUserManager,
    AbstractBaseUser,
    PermissionsMixin,
)
from .role import Role, STATUS_CHOICES
from .dept import Dept
from .post import Post

# 사용자 매니저
class UserManager(BaseUserManager):
    def create_user(self, username, password=None, role=None, **extra_fields):
        if not username:
            raise ValueError("사용자명은 필수 항목")

        user = self.model(username=username, role=role, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("status", "0")

        # role 기본값 지정
        try:
            admin_role = Role.objects.get(role_key="admin")
        except Role.DoesNotExist:
            admin_role = None
        extra_fields.setdefault("role", admin_role)

        return self.create_user(username, password, **extra_fields)


SEX_CHOICES = (
    ("0", "남"),
    ("1", "여"),
    ("2", "알 수 없음"),
)

# User 모델
class User(AbstractBaseUser, PermissionsMixin):
    username = models.CharField(max_length=64, unique=True)
    nick_name = models.CharField(max_length=128, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    sex = models.CharField(max_length=1, choices=SEX_CHOICES, default="2")
    avatar = models.CharField(max_length=255, blank=True, default="")
    status = models.CharField(max_length=1, choices=STATUS_CHOICES, default="0")
    is_staff = models.BooleanField(default=False)

    role = models.ForeignKey(Role, on_delete=models.SET_NULL, null=True, blank=True)
    dept = models.ForeignKey(Dept, on_delete=models.SET_NULL, null=True, blank=True)
    post = models.ForeignKey(Post, on_delete=models.SET_NULL, null=True, blank=True)

    # 복수 역할/직위 지정 ("1,2,3")
    role_ids = models.CharField(max_length=255, blank=True, default="")
    post_ids = models.CharField(max_length=255, blank=True, default="")

    remark = models.CharField(max_length=255, blank=True, default="")
    create_by = models.CharField(max_length=64, blank=True, default="")
    update_by = models.CharField(max_length=64, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    failed_login_count = models.PositiveIntegerField(default=0)  # 로그인 실패 횟수
    is_locked = models.BooleanField(default=False)   # 자동 잠금 여부
    locked_at = models.DateTimeField(null=True, blank=True)  # 계정 잠금 시각

    # 마지막 로그인 IP 주소
    last_login_ip = models.GenericIPAddressField(
        null=True,
        blank=True
    )

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["nick_name"]

    class Meta:
        db_table = "sys_users"
        ordering = ["id"]

    @property
    def is_active(self):
        # status "1" = 사용 중지
        return self.status == "0"

    def unlock(self):
        # 잠금 해제 + 실패 횟수 초기화 (저장은 호출하는 쪽에서)
        self.is_locked = False
        self.failed_login_count = 0
        self.locked_at = None

    def __str__(self):
        return self.username
