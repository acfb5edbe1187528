from django.db import models

# Menu 모델 설계 (메뉴 + 프론트 라우트 정보)

# 메뉴 유형
MENU_TYPE_CHOICES = (
    ("M", "디렉터리"),
    ("C", "메뉴"),
    ("F", "버튼"),
)

STATUS_CHOICES = (
    ("0", "정상"),
    ("1", "사용 중지"),
)


# 메뉴 기본 정보 (path, component, parent-child 구조)
class Menu(models.Model):
    id = models.BigAutoField(primary_key=True)
    menu_name = models.CharField(max_length=128)
    title = models.CharField(max_length=128, blank=True, default="")
    parent = models.ForeignKey("self", related_name="sub_menus", on_delete=models.CASCADE, blank=True, null=True)
    sort = models.IntegerField(default=0)
    icon = models.CharField(max_length=128, blank=True, default="")
    path = models.CharField(max_length=255, blank=True, default="")
    component = models.CharField(max_length=255, blank=True, default="")
    menu_type = models.CharField(max_length=1, choices=MENU_TYPE_CHOICES, default="C")
    permission = models.CharField(max_length=255, blank=True, default="")  # 'sys:user:view,sys:user:edit'

    # 프론트 라우트 플래그 (문자열 "0"/"1" 로 저장)
    is_link = models.CharField(max_length=255, blank=True, default="")  # 외부 링크 주소
    is_hide = models.CharField(max_length=1, default="0")        # "1" = 숨김
    is_keep_alive = models.CharField(max_length=1, default="1")  # "0" = 캐시 유지
    is_affix = models.CharField(max_length=1, default="1")       # "0" = 탭 고정
    is_frame = models.CharField(max_length=1, default="1")       # "0" = iframe

    status = models.CharField(max_length=1, choices=STATUS_CHOICES, default="0")
    create_by = models.CharField(max_length=64, blank=True, default="")
    update_by = models.CharField(max_length=64, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "sys_menus"
        ordering = ["sort", "id"]

    def __str__(self):
        return self.menu_name
