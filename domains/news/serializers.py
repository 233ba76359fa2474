from __future__ import annotations

from django.utils import timezone
from django.utils.text import slugify
from rest_framework import serializers

from .models import NewsPost


# ---------------------------
# 출력용: 목록 (본문 제외)
# ---------------------------
class NewsPostListSerializer(serializers.ModelSerializer):
    coverUrl = serializers.CharField(source="cover_url", allow_null=True, read_only=True)
    publishedAt = serializers.DateTimeField(source="published_at", allow_null=True, read_only=True)

    class Meta:
        model = NewsPost
        fields = ("id", "title", "summary", "coverUrl", "slug", "publishedAt")


# ---------------------------
# 출력용: 상세 (본문 포함)
# ---------------------------
class NewsPostDetailSerializer(NewsPostListSerializer):
    contentHtml = serializers.CharField(source="content_html", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta(NewsPostListSerializer.Meta):
        fields = NewsPostListSerializer.Meta.fields + ("contentHtml", "createdAt")


# ---------------------------
# 입력용: 작성/수정
# 빈 문자열은 NULL 로, slug 없으면 제목으로 생성
# ---------------------------
class NewsPostWriteSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, default="")
    summary = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    coverUrl = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    slug = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    contentHtml = serializers.CharField(required=False, allow_blank=True, default="")
    publishedAt = serializers.DateTimeField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        title = (attrs.get("title") or "").strip()
        content_html = (attrs.get("contentHtml") or "").strip()
        if not title or not content_html:
            raise serializers.ValidationError("title and contentHtml are required")

        slug = (attrs.get("slug") or "").strip() or slugify(title) or None

        qs = NewsPost.objects.filter(slug=slug) if slug else NewsPost.objects.none()
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError({"slug": "slug already exists"})

        return {
            "title": title,
            "summary": (attrs.get("summary") or "").strip() or None,
            "cover_url": (attrs.get("coverUrl") or "").strip() or None,
            "slug": slug,
            "content_html": content_html,
            "published_at": attrs.get("publishedAt"),
        }

    def create(self, validated_data):
        if validated_data.get("published_at") is None:
            validated_data["published_at"] = timezone.now()
        return NewsPost.objects.create(**validated_data)

    def update(self, instance, validated_data):
        if validated_data.get("published_at") is None:
            # 수정 시 날짜를 비우면 기존 발행일 유지
            validated_data["published_at"] = instance.published_at
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        return instance

    def to_representation(self, instance):
        return NewsPostDetailSerializer(instance).data
