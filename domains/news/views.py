# domains/news/views.py
from __future__ import annotations

import re

from django.db import transaction
from django.db.models import F

from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import parsers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.api_markers import ErrorSerializer
from shared.pagination import HasMorePagination
from shared.permissions import shared_secret_required

from .models import NewsPost
from .serializers import (
    NewsPostDetailSerializer,
    NewsPostListSerializer,
    NewsPostWriteSerializer,
)


# "12abc" → 12 처럼 앞쪽 정수만 읽음
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class NewsPagination(HasMorePagination):
    default_limit = 5
    max_limit = 20
    results_key = "posts"


def _published_order(qs):
    # 발행일 없는 글은 맨 뒤로 (Postgres DESC 는 NULL 이 먼저 옴)
    return qs.order_by(F("published_at").desc(nulls_last=True), "-created_at")


def _get_post_or_none(raw_id):
    try:
        post_id = int(raw_id)
    except (TypeError, ValueError):
        return None
    return NewsPost.objects.filter(pk=post_id).first()


# /api/news
class NewsAPI(APIView):
    """
    GET    /api/news?limit=&offset=   (누구나, 본문 제외 목록)
    POST   /api/news                  (시크릿, 작성)
    PUT    /api/news                  (시크릿 + id, 수정)
    DELETE /api/news                  (시크릿 + id, 삭제)
    """

    parser_classes = [parsers.JSONParser]
    permission_classes = [shared_secret_required("NEWS_SECRET")]
    pagination_class = NewsPagination

    @extend_schema(
        operation_id="ListNews",
        parameters=[
            OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY, required=False, description="기본 5, 최대 20"),
            OpenApiParameter("offset", OpenApiTypes.INT, OpenApiParameter.QUERY, required=False),
        ],
        responses={200: NewsPostListSerializer(many=True)},
        tags=["news"],
    )
    def get(self, request):
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(_published_order(NewsPost.objects.all()), request, view=self)
        data = NewsPostListSerializer(page, many=True).data
        return paginator.get_paginated_response(data)

    @transaction.atomic
    @extend_schema(
        operation_id="CreateNews",
        request=NewsPostWriteSerializer,
        responses={200: NewsPostDetailSerializer, 400: ErrorSerializer, 401: ErrorSerializer},
        tags=["news"],
    )
    def post(self, request):
        ser = NewsPostWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        ser.save()
        return Response({"post": ser.data}, status=status.HTTP_200_OK)

    @transaction.atomic
    @extend_schema(
        operation_id="UpdateNews",
        request=NewsPostWriteSerializer,
        responses={200: NewsPostDetailSerializer, 404: ErrorSerializer},
        tags=["news"],
    )
    def put(self, request):
        if not request.data.get("id"):
            return Response({"error": "id is required"}, status=status.HTTP_400_BAD_REQUEST)
        post = _get_post_or_none(request.data.get("id"))
        if post is None:
            return Response({"error": "Post not found"}, status=status.HTTP_404_NOT_FOUND)

        ser = NewsPostWriteSerializer(post, data=request.data)
        ser.is_valid(raise_exception=True)
        ser.save()
        return Response({"post": ser.data}, status=status.HTTP_200_OK)

    @transaction.atomic
    @extend_schema(
        operation_id="DeleteNews",
        responses={200: NewsPostDetailSerializer, 404: ErrorSerializer},
        tags=["news"],
    )
    def delete(self, request):
        if not request.data.get("id"):
            return Response({"error": "id is required"}, status=status.HTTP_400_BAD_REQUEST)
        post = _get_post_or_none(request.data.get("id"))
        if post is None:
            return Response({"error": "Post not found"}, status=status.HTTP_404_NOT_FOUND)

        removed = NewsPostDetailSerializer(post).data
        post.delete()
        return Response({"removed": removed}, status=status.HTTP_200_OK)


# /api/news-post?id= | ?slug=
class NewsPostDetailAPI(APIView):
    @extend_schema(
        operation_id="RetrieveNewsPost",
        parameters=[
            OpenApiParameter("id", OpenApiTypes.INT, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("slug", OpenApiTypes.STR, OpenApiParameter.QUERY, required=False),
        ],
        responses={200: NewsPostDetailSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
        tags=["news"],
    )
    def get(self, request):
        id_param = request.query_params.get("id")
        slug_param = request.query_params.get("slug")

        if not id_param and not slug_param:
            return Response({"error": "id or slug is required"}, status=status.HTTP_400_BAD_REQUEST)

        if id_param:
            m = _LEADING_INT.match(id_param)
            if m is None:
                return Response({"error": "id must be a number"}, status=status.HTTP_400_BAD_REQUEST)
            digits = m.group(1)
            # bigint 범위 밖이면 있을 수 없는 id
            post = NewsPost.objects.filter(pk=int(digits)).first() if len(digits.lstrip("+-")) <= 18 else None
        else:
            post = NewsPost.objects.filter(slug=slug_param).first()

        if post is None:
            return Response({"error": "Post not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response({"post": NewsPostDetailSerializer(post).data}, status=status.HTTP_200_OK)
