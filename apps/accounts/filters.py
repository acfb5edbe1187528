# apps/accounts/filters.py
import django_filters
from .models import User

# 사용자 검색 필터
# /sysUserList?username=adm&phone=010&status=0&deptId=2
class UserFilter(django_filters.FilterSet):
    username = django_filters.CharFilter(field_name="username", lookup_expr="icontains")
    phone = django_filters.CharFilter(field_name="phone", lookup_expr="icontains")
    status = django_filters.CharFilter(field_name="status", lookup_expr="exact")
    deptId = django_filters.NumberFilter(method="filter_dept")

    class Meta:
        model = User
        fields = ["username", "phone", "status", "deptId"]

    def filter_dept(self, queryset, name, value):
        # deptId=0 은 전체
        if not value:
            return queryset
        return queryset.filter(dept_id=value)
