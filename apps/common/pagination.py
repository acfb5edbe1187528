from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


# 사용자 목록 Pagination (?pageNum=1&pageSize=10)
class PageNumPagination(PageNumberPagination):
    page_size = 10
    page_size_query_param = "pageSize"
    page_query_param = "pageNum"
    max_page_size = 1000

    def get_paginated_response(self, data):
        return Response({
            "data": data,
            "total": self.page.paginator.count,
            "pageNum": self.page.number,
            "pageSize": self.get_page_size(self.request),
        })
