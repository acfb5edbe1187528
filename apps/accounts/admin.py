from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from .models import User, Role, Dept, Post, RoleMenu


# 커스텀 User 모델용 admin 폼
class SysUserCreationForm(UserCreationForm):
    class Meta(UserCreationForm.Meta):
        model = User
        fields = ("username", "nick_name", "role")


class SysUserChangeForm(UserChangeForm):
    class Meta(UserChangeForm.Meta):
        model = User
        fields = "__all__"


# admin 페이지 연결
@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = SysUserChangeForm
    add_form = SysUserCreationForm

    # 목록에 표시할 필드
    list_display = ("username", "nick_name", "phone", "role", "dept", "status", "is_staff", "last_login")
    list_filter = ("status", "is_staff", "role")
    search_fields = ("username", "nick_name", "phone", "email")
    ordering = ("username",)
    filter_horizontal = ()

    # 상세 화면에서 보여줄 필드 그룹
    fieldsets = (
        (None, {"fields": ("username", "password")}),
        ("개인정보", {"fields": ("nick_name", "phone", "email", "sex", "avatar")}),
        ("소속", {"fields": ("role", "dept", "post", "role_ids", "post_ids")}),
        ("권한", {"fields": ("status", "is_staff", "is_superuser")}),
        ("로그인 잠금", {"fields": ("is_locked", "failed_login_count", "locked_at")}),
        ("기록", {"fields": ("last_login", "last_login_ip", "created_at", "updated_at")}),
    )
    readonly_fields = ("created_at", "updated_at")

    # 사용자 추가 화면에서 보여줄 필드
    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("username", "nick_name", "role", "password1", "password2", "status", "is_staff", "is_superuser"),
        }),
    )

    def save_model(self, request, obj, form, change):
        # 잠금 해제 시 실패 횟수 초기화
        if change and "is_locked" in form.changed_data and not obj.is_locked:
            obj.unlock()
        super().save_model(request, obj, form, change)


admin.site.register(Role)
admin.site.register(Dept)
admin.site.register(Post)
admin.site.register(RoleMenu)
