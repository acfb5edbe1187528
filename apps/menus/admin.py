from django.contrib import admin
from .models import Menu


# Admin 등록
@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = ("menu_name", "path", "component", "menu_type", "permission", "sort", "status")
    list_filter = ("menu_type", "status")
    search_fields = ("menu_name", "path", "permission")
    ordering = ("sort", "id")
