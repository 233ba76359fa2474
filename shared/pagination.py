# shared/pagination.py
from __future__ import annotations

from rest_framework.pagination import BasePagination
from rest_framework.response import Response


def parse_non_negative(value, fallback: int) -> int:
    """정수 아님/음수 → fallback"""
    try:
        num = int(value)
    except (TypeError, ValueError):
        return fallback
    return num if num >= 0 else fallback


class HasMorePagination(BasePagination):
    """
    limit/offset 기반 "더 보기" 페이지네이션

    COUNT 쿼리 없이 limit + 1 개를 읽어서 다음 페이지 존재 여부만 판단한다.
    응답: {<results_key>: [...], "hasMore": bool, "nextOffset": int}
    """

    default_limit = 5
    max_limit = 20
    results_key = "results"

    def paginate_queryset(self, queryset, request, view=None):
        self.limit = min(parse_non_negative(request.query_params.get("limit"), self.default_limit), self.max_limit)
        self.offset = parse_non_negative(request.query_params.get("offset"), 0)

        rows = list(queryset[self.offset:self.offset + self.limit + 1])
        self.has_more = len(rows) > self.limit
        page = rows[: self.limit]
        self.next_offset = self.offset + len(page)
        return page

    def get_paginated_response(self, data):
        return Response(
            {
                self.results_key: data,
                "hasMore": self.has_more,
                "nextOffset": self.next_offset,
            }
        )

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                self.results_key: schema,
                "hasMore": {"type": "boolean"},
                "nextOffset": {"type": "integer"},
            },
        }
