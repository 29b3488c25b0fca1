"""
Page number pagination with the clinic's collection envelope.

Collections answer ``{"data": [...], "links": {...}, "meta": {...}}``
where ``links`` always carries ``first``, ``last``, ``prev`` and
``next`` (the latter two ``null`` at the edges).
"""
from __future__ import annotations

from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.utils.urls import replace_query_param


class ClinicPagination(PageNumberPagination):
    page_size = getattr(settings, 'CLINIC_PAGE_SIZE', 15)

    def page_link(self, number: int) -> str:
        return replace_query_param(self.request.build_absolute_uri(), self.page_query_param, number)

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        page = self.page
        return Response({
            'data': data,
            'links': {
                'first': self.page_link(1),
                'last': self.page_link(paginator.num_pages),
                'prev': self.page_link(page.previous_page_number()) if page.has_previous() else None,
                'next': self.page_link(page.next_page_number()) if page.has_next() else None,
            },
            'meta': {
                'current_page': page.number,
                'last_page': paginator.num_pages,
                'per_page': self.get_page_size(self.request),
                'total': paginator.count,
            },
        })


def paginate(request, queryset, serializer_class):
    paginator = ClinicPagination()
    page = paginator.paginate_queryset(queryset, request)
    serializer = serializer_class(page, many=True, context={'request': request})
    return paginator.get_paginated_response(serializer.data)
