from __future__ import annotations

from django.db import models


class NewsPost(models.Model):
    title = models.CharField(max_length=255)
    summary = models.TextField(null=True, blank=True)
    cover_url = models.CharField(max_length=1000, null=True, blank=True)
    slug = models.SlugField(max_length=255, unique=True, null=True, blank=True)
    content_html = models.TextField()
    published_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "news"
        ordering = ("-published_at", "-created_at")
        indexes = [
            models.Index(fields=["published_at", "created_at"], name="news_published_created_idx"),
        ]

    def __str__(self) -> str:
        return f"NewsPost({self.pk}) {self.title}"
