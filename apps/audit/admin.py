from django.contrib import admin
from .models import LoginLog


# Admin 사용자가 로그인 로그 확인
@admin.register(LoginLog)
class LoginLogAdmin(admin.ModelAdmin):
    list_display = ("username", "ipaddr", "login_location", "browser", "os", "status", "msg", "login_time")
    list_filter = ("status",)
    search_fields = ("username", "ipaddr")
    readonly_fields = ("login_time", "created_at")
